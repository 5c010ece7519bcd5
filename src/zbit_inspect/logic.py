import hashlib
from pathlib import Path

from zbit_core.errors import ERRORS, BitstreamError
from zbit_core.protocol import DEFAULT_MAX_FIELD_LENGTH
from zbit_convert.parser import process_bit_file


class _DigestSink:
    """Write target that only hashes what would have gone into the .bin."""

    def __init__(self):
        self.h = hashlib.sha256()
        self.size = 0

    def write(self, data) -> int:
        self.h.update(data)
        self.size += len(data)
        return len(data)


def _text(raw: bytes) -> str:
    return raw.rstrip(b"\x00").decode("utf-8", errors="replace")


def inspect_bitfile(path: Path, max_field_length: int = DEFAULT_MAX_FIELD_LENGTH) -> dict:
    errors = []
    if not Path(path).is_file():
        errors.append({"code": "E_INPUT_MISSING", "message": ERRORS["E_INPUT_MISSING"], "detail": str(path)})
        return {"status": "FAIL", "error_count": len(errors), "errors": errors}

    sink = _DigestSink()
    try:
        with open(path, "rb") as f:
            summary = process_bit_file(f, sink, emit=None, max_field_length=max_field_length)
    except BitstreamError as e:
        errors.append(e.as_dict())
        return {"status": "FAIL", "error_count": len(errors), "errors": errors}
    except OSError as e:
        errors.append({"code": "E_INPUT_READ", "message": ERRORS["E_INPUT_READ"], "detail": str(e)})
        return {"status": "FAIL", "error_count": len(errors), "errors": errors}

    fw = summary["firmware"]
    return {
        "status": "PASS",
        "error_count": 0,
        "errors": [],
        "fields": {f["name"]: _text(f["text"]) for f in summary["fields"]},
        "firmware": {
            "length": fw["length"],
            "payload_length": fw["payload_length"],
            "byte_order": "inverted" if fw["inverted"] else "canonical",
            "sha256": sink.h.hexdigest(),
        },
    }
