CANONICAL_JSON_KW = {"sort_keys": True, "separators": (",", ":"), "ensure_ascii": False}

ERRORS = {
  "E_MALFORMED_HEADER": "Wall header could not be decoded",
  "E_MALFORMED_RECORD": "Wall record could not be decoded",
  "E_WALL_FULL": "The graffiti wall is full",
  "E_ACCOUNT_TOO_SMALL": "Account is too small to store message",
  "E_BUFFER_TOO_SMALL": "Write target is smaller than the encoded value",
  "E_OUT_OF_RANGE": "Message index is out of range",
  "E_INVALID_PAYLOAD": "Name and message must be exactly 64 bytes",
}
