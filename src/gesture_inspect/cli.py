import json
from pathlib import Path
import click
from .logic import inspect_store

@click.group()
def main():
    pass

@main.command("store")
@click.argument("path", type=click.Path(path_type=Path))
def store_cmd(path: Path):
    result = inspect_store(path)
    click.echo(json.dumps(result, sort_keys=True, separators=(",", ":"), ensure_ascii=False))
    if result["status"] != "PASS":
        raise SystemExit(1)

if __name__ == "__main__":
    main()
