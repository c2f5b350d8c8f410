#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Scenario loading module: read calculator inputs for batch projection from CSV.
Handles column mapping, type coercion and per-row validation.
"""

from pathlib import Path
from typing import List, Tuple, Union

import pandas as pd

from ..engine.logic import build_inputs, validate_inputs
from ..engine.schema import InvalidInput, UpsellInputs
from ..utils import get_logger, REQUIRED_COLUMNS, COLUMN_RENAME_MAP, NUMERIC_COLUMNS

logger = get_logger(__name__)

def load_from_csv(path: Union[str, Path]) -> pd.DataFrame:
    """
    Load raw scenario rows from a CSV file.
    
    Raises:
        InvalidInput: If the file is missing or cannot be parsed
    """
    try:
        df = pd.read_csv(path)
    except FileNotFoundError:
        logger.error(f"Scenario file not found: {path}")
        raise InvalidInput(f"Scenario file not found: {path}")
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        logger.error(f"Failed to parse scenario CSV: {e}")
        raise InvalidInput(f"Could not read scenario file {path}: {e}")
    logger.info(f"Loaded {len(df):,} rows from CSV: {path}")
    return df

def validate_and_prepare_dataset(df: pd.DataFrame) -> pd.DataFrame:
    """
    Validate required columns, rename columns, and coerce numeric types.
    
    Args:
        df: Raw DataFrame from CSV
    
    Returns:
        DataFrame with snake_case input columns
    
    Raises:
        InvalidInput: If the dataset is empty or columns are missing
    """
    if df is None or df.empty:
        raise InvalidInput("Scenario file contains no rows")
    
    # Case-insensitive column renaming
    df = df.copy()
    df.columns = [str(c).strip() for c in df.columns]
    lower_map = {c.lower(): c for c in df.columns}
    
    missing = [col for col in REQUIRED_COLUMNS if col.lower() not in lower_map]
    if missing:
        logger.error(f"Missing columns in scenario file: {missing}")
        raise InvalidInput(f"Missing columns in scenario file: {missing}")
    
    rename_dict = {}
    for k, v in COLUMN_RENAME_MAP.items():
        if k.lower() in lower_map:
            rename_dict[lower_map[k.lower()]] = v
    df = df.rename(columns=rename_dict)
    
    # Coerce numeric columns; unparseable cells become NaN and fail validation per row
    for col in NUMERIC_COLUMNS:
        df[col] = pd.to_numeric(df[col], errors="coerce")
    
    logger.info(f"Scenarios validated: {len(df)} rows")
    return df

def rows_to_inputs(df: pd.DataFrame) -> List[Tuple[str, UpsellInputs]]:
    """
    Convert prepared rows into (scenario_name, UpsellInputs) pairs.
    
    Raises:
        InvalidInput: Naming the 1-based data row that failed
    """
    scenarios = []
    for i, row in enumerate(df.to_dict(orient="records"), 1):
        name = row.get("scenario")
        if name is None or pd.isna(name) or not str(name).strip():
            name = f"Scenario {i}"
        try:
            inputs = build_inputs(**{c: float(row[c]) for c in NUMERIC_COLUMNS})
            validate_inputs(inputs)
        except InvalidInput as e:
            raise InvalidInput(f"Row {i} ({name}): {e}", field=e.field)
        scenarios.append((str(name).strip(), inputs))
    return scenarios

def load_scenarios(path: Union[str, Path]) -> List[Tuple[str, UpsellInputs]]:
    """Load, validate and parse a scenario CSV."""
    return rows_to_inputs(validate_and_prepare_dataset(load_from_csv(path)))
