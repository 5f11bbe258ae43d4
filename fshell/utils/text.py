"""
Helpers for putting host-provided text on the console.
"""


def printable(text: str) -> str:
    """
    Return ``text`` in a form any UTF-8 stream accepts.

    On POSIX hosts file names and terminal input that are not valid UTF-8
    reach Python as lone surrogates (PEP 383). Those are mapped back to their
    bytes and decoded again, so each undecodable byte shows up as U+FFFD.

    Args:
        text: Text that may carry surrogate escapes

    Returns:
        Text free of surrogates
    """
    try:
        raw = text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        # surrogates that did not come from surrogateescape decoding
        raw = text.encode("utf-8", "replace")
    return raw.decode("utf-8", "replace")
