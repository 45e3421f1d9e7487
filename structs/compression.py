import zstandard

from structs.errors import DecompressError


def zstd_decompress(blob: bytes) -> bytes:
    """Decompresses every zstd frame in `blob` and concatenates the output."""
    dctx = zstandard.ZstdDecompressor()
    out = []
    data = blob
    try:
        while data:
            dobj = dctx.decompressobj()
            out.append(dobj.decompress(data))
            if not dobj.eof:
                raise DecompressError("Truncated zstd frame.")
            data = dobj.unused_data
    except zstandard.ZstdError as e:
        raise DecompressError(f"Corrupt zstd data: {e}") from e
    return b''.join(out)
