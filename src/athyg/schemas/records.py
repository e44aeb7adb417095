"""
Immutable star records, one type per catalog version.

The three record types are independent: they share no base class and each
mirrors its own column table field for field. Numeric fields are None when
the source field was absent; text fields are always strings.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StarV1:
    """One row of an ATHYG version 1 file (23 columns)."""

    id: int | None
    tyc: str
    gaia: int | None
    hyg: int | None
    hip: int | None
    hd: int | None
    hr: int | None
    gl: str
    bayer: str
    flam: str
    con: str
    proper: str
    ra: float | None
    dec: float | None
    pos_src: str
    dist: float | None
    x0: float | None
    y0: float | None
    z0: float | None
    dist_src: str
    mag: float | None
    absmag: float | None
    mag_src: str


@dataclass(frozen=True, slots=True)
class StarV2:
    """One row of an ATHYG version 2 file (33 columns)."""

    id: int | None
    tyc: str
    gaia: int | None
    hyg: int | None
    hip: int | None
    hd: int | None
    hr: int | None
    gl: str
    bayer: str
    flam: str
    con: str
    proper: str
    ra: float | None
    dec: float | None
    pos_src: str
    dist: float | None
    x0: float | None
    y0: float | None
    z0: float | None
    dist_src: str
    mag: float | None
    absmag: float | None
    mag_src: str
    rv: float | None
    rv_src: str
    pm_ra: float | None
    pm_dec: float | None
    pm_src: float | None
    vx: float | None
    vy: float | None
    vz: float | None
    spect: float | None
    spect_src: str


@dataclass(frozen=True, slots=True)
class StarV3:
    """One row of an ATHYG version 3 file (34 columns, adds ``ci``)."""

    id: int | None
    tyc: str
    gaia: int | None
    hyg: int | None
    hip: int | None
    hd: int | None
    hr: int | None
    gl: str
    bayer: str
    flam: str
    con: str
    proper: str
    ra: float | None
    dec: float | None
    pos_src: str
    dist: float | None
    x0: float | None
    y0: float | None
    z0: float | None
    dist_src: str
    mag: float | None
    absmag: float | None
    ci: float | None
    mag_src: str
    rv: float | None
    rv_src: str
    pm_ra: float | None
    pm_dec: float | None
    pm_src: float | None
    vx: float | None
    vy: float | None
    vz: float | None
    spect: float | None
    spect_src: str


StarRecord = StarV1 | StarV2 | StarV3
