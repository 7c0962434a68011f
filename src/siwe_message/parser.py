"""
EIP-4361 message parser.

The text is read as three independent sections:

- prefix: header line, address line and the optional statement
- suffix: the ``URI:`` ... ``Issued At:`` block and its optional trailers
- resources: the ``- `` lines after a ``Resources:`` line following the suffix

A section that does not match is simply left out of the result; parsing
never fails.
"""

import logging
import re
from typing import Any, Optional

from siwe_message.models.message import ParsedMessage
from siwe_message.serializer import HEADER_SUFFIX
from siwe_message.timestamps import parse_timestamp

logger = logging.getLogger("siwe_message.parser")

_HEADER = re.compile(
    r"(?:(?P<scheme>[a-zA-Z][a-zA-Z0-9+.,-]*)://)?(?P<domain>[a-zA-Z0-9+.,-]*)"
    + re.escape(HEADER_SUFFIX)
)
_ADDRESS = re.compile(r"0x[a-fA-F0-9]{40}")

# Consecutive lines, in order, all required.
_REQUIRED_LINES = (
    ("version", re.compile(r"Version: (.+)")),
    ("chain_id", re.compile(r"Chain ID: ([0-9]+)")),
    ("nonce", re.compile(r"Nonce: ([a-zA-Z0-9]+)")),
    ("issued_at", re.compile(r"Issued At: (.+)")),
)
# Each may be skipped, but the relative order is fixed.
_OPTIONAL_LINES = (
    ("expiration_time", re.compile(r"Expiration Time: (.+)")),
    ("not_before", re.compile(r"Not Before: (.+)")),
    ("request_id", re.compile(r"Request ID: (.+)")),
)

_URI_LABEL = "URI: "
_RESOURCES_MARKER = "Resources:"
_TIMESTAMP_FIELDS = ("issued_at", "expiration_time", "not_before")


def _parse_prefix(lines: list[str]) -> dict[str, str]:
    # header \n address \n "" \n ...
    if len(lines) < 4:
        return {}
    header = _HEADER.fullmatch(lines[0])
    if not header or not _ADDRESS.fullmatch(lines[1]) or lines[2] != "":
        return {}

    fields = {"domain": header.group("domain"), "address": lines[1]}
    if header.group("scheme"):
        fields["scheme"] = header.group("scheme")
    if len(lines) > 5 and lines[4] == "":
        fields["statement"] = lines[3]
    return fields


def _match_suffix_at(lines: list[str], start: int, uri: str) -> Optional[tuple[dict[str, str], int]]:
    fields = {"uri": uri}
    pos = start + 1
    for name, pattern in _REQUIRED_LINES:
        m = pattern.fullmatch(lines[pos]) if pos < len(lines) else None
        if not m:
            return None
        fields[name] = m.group(1)
        pos += 1
    for name, pattern in _OPTIONAL_LINES:
        m = pattern.fullmatch(lines[pos]) if pos < len(lines) else None
        if m:
            fields[name] = m.group(1)
            pos += 1
    return fields, pos


def _parse_suffix(lines: list[str]) -> tuple[dict[str, str], int]:
    """Suffix fields and the index of the first line after the block (0 if none)."""
    for i, line in enumerate(lines):
        at = line.find(_URI_LABEL)
        if at < 0:
            continue
        uri = line[at + len(_URI_LABEL):]
        if not uri:
            continue
        matched = _match_suffix_at(lines, i, uri)
        if matched is not None:
            return matched
    return {}, 0


def _parse_resources(lines: list[str], start: int) -> Optional[tuple[str, ...]]:
    # the marker must be a line of its own, after the suffix block
    for i in range(start, len(lines)):
        if lines[i] == _RESOURCES_MARKER:
            break
    else:
        return None
    resources = []
    for line in lines[i + 1:]:
        if not line.startswith("- "):
            break
        resources.append(line[2:])
    return tuple(resources)


def parse_message(message: str) -> ParsedMessage:
    """Parse EIP-4361 text into whatever fields it structurally contains."""
    lines = message.split("\n")
    suffix, suffix_end = _parse_suffix(lines)
    fields: dict[str, Any] = {**_parse_prefix(lines), **suffix}

    if "chain_id" in fields:
        try:
            fields["chain_id"] = int(fields["chain_id"])
        except ValueError:
            # more digits than int() converts
            logger.debug("dropping chain_id with %d digits", len(fields["chain_id"]))
            del fields["chain_id"]
    for name in _TIMESTAMP_FIELDS:
        if name not in fields:
            continue
        value = parse_timestamp(fields[name])
        if value is None:
            logger.debug("dropping unparsable %s: %r", name, fields[name])
            del fields[name]
        else:
            fields[name] = value

    resources = _parse_resources(lines, suffix_end)
    if resources is not None:
        fields["resources"] = resources

    return ParsedMessage(**fields)
