"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest

from athyg.schemas.registry import SchemaRegistry, SchemaVersion

# One realistic row (Sirius) covering every column of every version.
SIRIUS: dict[str, str] = {
    "id": "1",
    "tyc": "5949-2777-1",
    "gaia": "2947050466531873024",
    "hyg": "32263",
    "hip": "32349",
    "hd": "48915",
    "hr": "2491",
    "gl": "Gl 244A",
    "bayer": "Alp",
    "flam": "9",
    "con": "CMa",
    "proper": "Sirius",
    "ra": "6.752481",
    "dec": "-16.716116",
    "pos_src": "HIP",
    "dist": "2.6371",
    "x0": "-0.494323",
    "y0": "2.476731",
    "z0": "-0.758485",
    "dist_src": "HIP",
    "mag": "-1.44",
    "absmag": "1.454",
    "ci": "0.009",
    "mag_src": "HIP",
    "rv": "-5.5",
    "rv_src": "GCRV",
    "pm_ra": "-546.01",
    "pm_dec": "-1223.08",
    "pm_src": "HIP",
    "vx": "0.00000372",
    "vy": "-0.00000624",
    "vz": "-0.00000113",
    "spect": "A1V",
    "spect_src": "HIP",
}


@pytest.fixture
def sirius() -> dict[str, str]:
    """Return raw field text for a well-known star."""
    return dict(SIRIUS)


@pytest.fixture
def make_tokens() -> Callable[..., list[str]]:
    """Return a factory building a full token list for a version."""

    def _make(version: SchemaVersion | str, **overrides: str) -> list[str]:
        schema = SchemaRegistry.get(version)
        values = {**SIRIUS, **overrides}
        return [values[name] for name in schema.column_names]

    return _make


@pytest.fixture
def make_line(make_tokens: Callable[..., list[str]]) -> Callable[..., str]:
    """Return a factory building one comma-delimited data line."""

    def _make(version: SchemaVersion | str, **overrides: str) -> str:
        return ",".join(make_tokens(version, **overrides))

    return _make


@pytest.fixture
def write_catalog(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory writing a catalog file with a header line."""

    def _write(
        name: str,
        version: SchemaVersion | str,
        lines: list[str],
        header: str | None = None,
        trailing_newline: bool = True,
    ) -> Path:
        schema = SchemaRegistry.get(version)
        header_line = ",".join(schema.column_names) if header is None else header
        text = "\n".join([header_line, *lines])
        if trailing_newline:
            text += "\n"
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
