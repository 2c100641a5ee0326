"""Generate static error-code maps from program error enum sources."""

from __future__ import annotations

import re

_INTEGER = re.compile(r"[+-]?[0-9]+")
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_U64_MASK = 2**64 - 1


class WtfConversionError(ValueError):
    """Raised when an error enum cannot be found or parsed."""


def _ascii_upper(text: str) -> str:
    return "".join(c.upper() if "a" <= c <= "z" else c for c in text)


def _capitalize(word: str) -> str:
    if not word:
        raise WtfConversionError(f"Cannot derive enum name from empty word in file name")
    return _ascii_upper(word[0]) + word[1:]


def _hex(number: int) -> str:
    return f"{number & _U64_MASK:X}" if number < 0 else f"{number:X}"


def generate_phf_map_var(var_name: str) -> str:
    """Return the opening line of a static map declaration named ``var_name``."""
    return (
        f"pub static {var_name}: phf::Map<&'static str, &'static str> = phf_map! {{\n"
    )


def convert_to_wtf_error(file_name: str, file_contents: str) -> str:
    """Turn the error enum in ``file_contents`` into a hex-code to message map."""
    words = file_name.replace(".rs", "").replace("-", " ").split(" ")

    map_name = "_".join(_ascii_upper(word) for word in words)
    error_contents = generate_phf_map_var(map_name)

    is_anchor = "anchor" in file_name
    if is_anchor:
        error_number = 100
    elif "#[msg" in file_contents:
        error_number = 6000
    else:
        error_number = 0

    enum_name = "ErrorCode" if is_anchor else "".join(_capitalize(w) for w in words)

    error_index = file_contents.find(enum_name)
    if error_index < 0:
        raise WtfConversionError("Could not find Error enum")

    start = error_index + len(enum_name) + 2
    if start > len(file_contents):
        raise WtfConversionError("Malformed Error enum")
    trimmed = file_contents[start:].strip()
    if "}" not in trimmed:
        raise WtfConversionError("Malformed Error enum")

    pending = '",\n'
    for raw_line in trimmed.split("\n"):
        line = raw_line.strip()

        if line.startswith("}"):
            break

        if line.startswith("/") or not line:
            continue
        if (
            not line.startswith("#[")
            and not line.startswith('"')
            and not line.endswith('"')
            and not line.endswith(")]")
        ):
            comma = line.find(",")
            if comma < 0:
                raise WtfConversionError("Malformed Error enum")
            variant = line[:comma]

            if "=" in variant:
                parts = variant.split("=")
                variant = parts[0].strip()
                value = parts[1].strip()
                if not _INTEGER.fullmatch(value):
                    raise WtfConversionError(f"Invalid error code value: {value!r}")
                error_number = int(value)
                if not _I64_MIN <= error_number <= _I64_MAX:
                    raise WtfConversionError(f"Error code out of range: {value!r}")

            pending = f'    "{_hex(error_number)}" => "{variant}{pending}'
        elif line.startswith("#[") and line.endswith(")]"):
            message = (
                line.replace("#[", "")
                .replace('error("', "")
                .replace('msg("', "")
                .replace('")]', "")
            )
            pending = f': {message}",\n'

        if "=>" in pending:
            error_contents += pending
            error_number += 1
            pending = '",\n'

    return error_contents + "};\n\n"