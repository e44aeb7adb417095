"""
Tabular export of loaded records.

Converts records to pandas DataFrames with nullable dtypes, validates them
with Pandera schemas, and writes them back out as catalog files.
"""

import csv
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series

from athyg.parsing import ValueKind
from athyg.schemas.registry import SchemaRegistry, SchemaVersion
from athyg.utils.logging import get_logger

log = get_logger(__name__)

# pandas dtype used for each column kind
KIND_DTYPES: dict[ValueKind, str] = {
    ValueKind.INTEGER: "UInt64",
    ValueKind.DECIMAL: "float64",
    ValueKind.CHARACTER: "object",
    ValueKind.BOOLEAN: "boolean",
    ValueKind.TEXT: "object",
}


class StarV1Schema(pa.DataFrameModel):
    """
    Schema for version 1 star tables.

    Identifier and numeric columns are nullable; text columns are not.
    """

    id: Series[pd.UInt64Dtype] = pa.Field(nullable=True, description="Catalog row id")
    tyc: Series[str] = pa.Field(description="Tycho-2 identifier")
    gaia: Series[pd.UInt64Dtype] = pa.Field(nullable=True, description="Gaia source id")
    hyg: Series[pd.UInt64Dtype] = pa.Field(nullable=True, description="HYG id")
    hip: Series[pd.UInt64Dtype] = pa.Field(nullable=True, description="Hipparcos id")
    hd: Series[pd.UInt64Dtype] = pa.Field(nullable=True, description="Henry Draper id")
    hr: Series[pd.UInt64Dtype] = pa.Field(nullable=True, description="Harvard Revised id")
    gl: Series[str] = pa.Field(description="Gliese catalog id")
    bayer: Series[str] = pa.Field(description="Bayer designation")
    flam: Series[str] = pa.Field(description="Flamsteed number")
    con: Series[str] = pa.Field(description="Constellation abbreviation")
    proper: Series[str] = pa.Field(description="Proper name")
    ra: Series[float] = pa.Field(
        ge=0.0, le=24.0, nullable=True, description="Right ascension in hours (J2000)"
    )
    dec: Series[float] = pa.Field(
        ge=-90.0, le=90.0, nullable=True, description="Declination in degrees (J2000)"
    )
    pos_src: Series[str] = pa.Field(description="Position source")
    dist: Series[float] = pa.Field(nullable=True, description="Distance in parsecs")
    x0: Series[float] = pa.Field(nullable=True, description="Cartesian x in parsecs")
    y0: Series[float] = pa.Field(nullable=True, description="Cartesian y in parsecs")
    z0: Series[float] = pa.Field(nullable=True, description="Cartesian z in parsecs")
    dist_src: Series[str] = pa.Field(description="Distance source")
    mag: Series[float] = pa.Field(nullable=True, description="Apparent V magnitude")
    absmag: Series[float] = pa.Field(nullable=True, description="Absolute V magnitude")
    mag_src: Series[str] = pa.Field(description="Magnitude source")

    class Config:
        """Schema configuration."""

        name = "StarV1Schema"
        strict = False
        coerce = True


class StarV2Schema(StarV1Schema):
    """Schema for version 2 star tables (adds motion and spectral columns)."""

    rv: Series[float] = pa.Field(nullable=True, description="Radial velocity in km/s")
    rv_src: Series[str] = pa.Field(description="Radial velocity source")
    pm_ra: Series[float] = pa.Field(nullable=True, description="Proper motion in RA")
    pm_dec: Series[float] = pa.Field(nullable=True, description="Proper motion in Dec")
    pm_src: Series[float] = pa.Field(nullable=True, description="Proper motion source")
    vx: Series[float] = pa.Field(nullable=True, description="Space velocity x")
    vy: Series[float] = pa.Field(nullable=True, description="Space velocity y")
    vz: Series[float] = pa.Field(nullable=True, description="Space velocity z")
    spect: Series[float] = pa.Field(nullable=True, description="Spectral type")
    spect_src: Series[str] = pa.Field(description="Spectral type source")

    class Config:
        """Schema configuration."""

        name = "StarV2Schema"
        strict = False
        coerce = True


class StarV3Schema(StarV2Schema):
    """Schema for version 3 star tables (adds colour index)."""

    ci: Series[float] = pa.Field(nullable=True, description="B-V colour index")

    class Config:
        """Schema configuration."""

        name = "StarV3Schema"
        strict = False
        coerce = True


DATAFRAME_SCHEMAS: dict[SchemaVersion, type[pa.DataFrameModel]] = {
    SchemaVersion.V1: StarV1Schema,
    SchemaVersion.V2: StarV2Schema,
    SchemaVersion.V3: StarV3Schema,
}


def records_to_dataframe(
    records: Sequence[Any],
    version: SchemaVersion | str,
) -> pd.DataFrame:
    """
    Convert records of one version to a DataFrame.

    Columns follow the schema's column order. Absent integers become
    ``pd.NA``, absent decimals ``NaN``.

    Args:
        records: Records of the given version.
        version: Schema version of the records.

    Returns:
        DataFrame with one row per record.

    Raises:
        TypeError: If a record is not of the version's record type.
    """
    schema = SchemaRegistry.get(version)

    for record in records:
        if not isinstance(record, schema.record_type):
            msg = (
                f"Expected {schema.record_type.__name__} records for "
                f"{schema.version.value}, got {type(record).__name__}"
            )
            raise TypeError(msg)

    data = {
        column.name: pd.Series(
            [getattr(record, column.name) for record in records],
            dtype=KIND_DTYPES[column.kind],
        )
        for column in schema.columns
    }
    return pd.DataFrame(data, columns=list(schema.column_names))


def validate_dataframe(df: pd.DataFrame, version: SchemaVersion | str) -> pd.DataFrame:
    """
    Validate a star table against its version's Pandera schema.

    Args:
        df: DataFrame from records_to_dataframe.
        version: Schema version.

    Returns:
        Validated DataFrame.

    Raises:
        pandera.errors.SchemaError: If validation fails.
    """
    return DATAFRAME_SCHEMAS[SchemaVersion.coerce(version)].validate(df)


def write_csv(
    records: Sequence[Any],
    version: SchemaVersion | str,
    path: Path,
    delimiter: str = ",",
) -> Path:
    """
    Write records as a catalog file that loads back with the same version.

    Fields are written unquoted, so text containing the delimiter cannot be
    represented and raises ``csv.Error``.

    Args:
        records: Records of the given version.
        version: Schema version of the records.
        path: Output file.
        delimiter: Field separator.

    Returns:
        The written path.
    """
    df = records_to_dataframe(records, version)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False, sep=delimiter, quoting=csv.QUOTE_NONE, na_rep="")
    log.info("Saved catalog", path=str(path), rows=len(df))
    return path
