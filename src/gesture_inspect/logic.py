from pathlib import Path
from gesture_core.errors import GestureStoreError
from gesture_import.decoder import GestureStoreDecoder, read_store_bytes
from .const import ERRORS

def _fail(err: GestureStoreError, **extra) -> dict:
    entry = {"code": err.code, "message": ERRORS.get(err.code, str(err)), "detail": str(err)}
    if err.offset is not None:
        entry["offset"] = err.offset
    entry.update(extra)
    return {"status":"FAIL","error_count":1,"errors":[entry]}

def inspect_store(path: Path) -> dict:
    try:
        data = read_store_bytes(path)
    except GestureStoreError as e:
        return _fail(e, path=str(path))

    decoder = GestureStoreDecoder(data)
    try:
        gestures = decoder.decode()
    except GestureStoreError as e:
        return _fail(e, path=str(path))

    stats = decoder.get_stats()
    return {
        "status":"PASS",
        "error_count":0,
        "errors":[],
        "bytes":len(data),
        "version":stats["version"],
        "entries":stats["entries"],
        "gestures":stats["gestures"],
        "strokes":stats["strokes"],
        "points":stats["points"],
        "names":sorted({g.id for g in gestures}),
    }
