import json

from chia_rs import FullBlock

from structs.errors import BlockDecodeError


def parse_full_block(blob: bytes) -> FullBlock:
    """Deserializes a streamable FullBlock."""
    try:
        return FullBlock.from_bytes(blob)
    except Exception as e:
        raise BlockDecodeError(f"Failed to parse FullBlock: {e}") from e


def full_block_json(blob: bytes) -> str:
    return json.dumps(parse_full_block(blob).to_json_dict())
