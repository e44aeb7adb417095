"""
Column tables for the ATHYG catalog versions.

See https://github.com/astronexus/ATHYG-Database/blob/main/version-info.md
"""

from dataclasses import dataclass

from athyg.parsing import ValueKind


@dataclass(frozen=True)
class Column:
    """A named, typed position in a catalog row."""

    name: str
    kind: ValueKind


_INT = ValueKind.INTEGER
_DEC = ValueKind.DECIMAL
_TXT = ValueKind.TEXT

V1_COLUMNS: tuple[Column, ...] = (
    Column("id", _INT),
    Column("tyc", _TXT),
    Column("gaia", _INT),
    Column("hyg", _INT),
    Column("hip", _INT),
    Column("hd", _INT),
    Column("hr", _INT),
    Column("gl", _TXT),
    Column("bayer", _TXT),
    Column("flam", _TXT),
    Column("con", _TXT),
    Column("proper", _TXT),
    Column("ra", _DEC),
    Column("dec", _DEC),
    Column("pos_src", _TXT),
    Column("dist", _DEC),
    Column("x0", _DEC),
    Column("y0", _DEC),
    Column("z0", _DEC),
    Column("dist_src", _TXT),
    Column("mag", _DEC),
    Column("absmag", _DEC),
    Column("mag_src", _TXT),
)

# Kinematics and spectral columns appended in version 2.
_MOTION_COLUMNS: tuple[Column, ...] = (
    Column("rv", _DEC),
    Column("rv_src", _TXT),
    Column("pm_ra", _DEC),
    Column("pm_dec", _DEC),
    Column("pm_src", _DEC),
    Column("vx", _DEC),
    Column("vy", _DEC),
    Column("vz", _DEC),
    Column("spect", _DEC),
    Column("spect_src", _TXT),
)

V2_COLUMNS: tuple[Column, ...] = V1_COLUMNS + _MOTION_COLUMNS

# Version 3 adds the colour index between absmag and mag_src.
_CI_POSITION = 22

V3_COLUMNS: tuple[Column, ...] = (
    V1_COLUMNS[:_CI_POSITION]
    + (Column("ci", _DEC),)
    + V1_COLUMNS[_CI_POSITION:]
    + _MOTION_COLUMNS
)
