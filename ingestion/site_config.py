"""Site configuration ingestion.

The live settings are kept in a Google Sheet with two columns, parameter
and value, one setting per row:

    parameter,value
    tie_breaker_low,50
    tie_breaker_high,500
    stop_submit_toggle,No
    stop_submit_date_time,2026-03-19T12:00:00-04:00

The sheet is read through its public CSV export, so no auth is required.
"""

import json
from io import StringIO

import pandas as pd
import requests

import config
from errors import SiteConfigError
from models.site_config import SiteConfig

FALLBACK_SITE_CONFIG = SiteConfig(
    tie_breaker_low=config.DEFAULT_TIE_BREAKER_LOW,
    tie_breaker_high=config.DEFAULT_TIE_BREAKER_HIGH,
    stop_submit_toggle="No",
    stop_submit_date_time="",
    final_message_too_late=config.MESSAGE_TOO_LATE,
    final_message_submit_off=config.MESSAGE_SUBMIT_OFF,
)


def fetch_site_config(sheet_id: str = config.SITE_CONFIG_SHEET_ID, gid: int = 0) -> SiteConfig:
    """Download the site config sheet and parse it.

    Raises:
        SiteConfigError: if no sheet id is set or the download fails
    """
    if not sheet_id:
        raise SiteConfigError("Google Sheets", "no sheet id configured (set SITE_CONFIG_SHEET_ID)")

    url = config.SHEET_CSV_URL.format(sheet_id=sheet_id, gid=gid)
    print(f"Fetching site config from {url}...")

    try:
        resp = requests.get(url, timeout=30)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise SiteConfigError(url, str(e)) from e

    return parse_site_config_csv(resp.text)


def parse_site_config_csv(text: str) -> SiteConfig:
    """Parse "parameter,value" rows (header row first) into a SiteConfig."""
    df = pd.read_csv(StringIO(text), dtype=str, header=0).fillna("")
    if df.shape[1] < 2:
        raise SiteConfigError("CSV", "expected parameter and value columns")

    settings = {}
    for _, row in df.iterrows():
        parameter = str(row.iloc[0]).strip()
        if parameter:
            settings[parameter] = str(row.iloc[1]).strip()

    return SiteConfig.from_dict(settings)


def load_site_config_from_json(filepath: str) -> SiteConfig:
    """Load site config from a JSON object (camelCase or snake_case keys)."""
    with open(filepath, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise SiteConfigError(filepath, "expected a JSON object")
    return SiteConfig.from_dict(data)
