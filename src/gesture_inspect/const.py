ERRORS = {
  "E_RESOURCE_UNAVAILABLE": "Gesture store missing or unreadable",
  "E_TRUNCATED": "Gesture store ended before the record hierarchy was complete",
  "E_TEXT_DECODE": "Entry name is not valid UTF-8",
}
