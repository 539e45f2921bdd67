"""
Unit tests for site configuration loading.
"""
import json
from unittest.mock import Mock, patch

import pytest
import requests

from errors import SiteConfigError
from ingestion.site_config import (
    FALLBACK_SITE_CONFIG,
    fetch_site_config,
    load_site_config_from_json,
    parse_site_config_csv,
)
from models.site_config import SiteConfig

SHEET_CSV = """parameter,value
site_name,Family Pool
tie_breaker_low,100
tie_breaker_high,300
stop_submit_toggle,No
stop_submit_date_time,2026-03-19T12:00:00-04:00
final_message_too_late,"Sorry, too late"
"""


class TestSiteConfigModel:

    def test_camel_case_keys(self):
        cfg = SiteConfig.from_dict({
            "tieBreakerLow": 50,
            "tieBreakerHigh": "500",
            "stopSubmitToggle": "Yes",
            "finalMessageSubmitOff": "Off",
            "siteName": "Pool",
        })
        assert cfg.tie_breaker_low == 50
        assert cfg.tie_breaker_high == 500
        assert cfg.stop_submit_toggle == "Yes"
        assert cfg.final_message_submit_off == "Off"
        assert cfg.extra == {"siteName": "Pool"}

    def test_upper_case_snake_keys(self):
        cfg = SiteConfig.from_dict({"TIE_BREAKER_LOW": "75", "Stop_Submit_Toggle": "Yes"})
        assert cfg.tie_breaker_low == 75
        assert cfg.stop_submit_toggle == "Yes"
        assert cfg.extra == {}

    def test_blank_and_bad_bounds_become_none(self):
        cfg = SiteConfig.from_dict({"tie_breaker_low": "", "tie_breaker_high": "lots"})
        assert cfg.tie_breaker_low is None
        assert cfg.tie_breaker_high is None

    def test_defaults(self):
        cfg = SiteConfig()
        assert cfg.stop_submit_toggle == "No"
        assert cfg.stop_submit_date_time == ""

    def test_fallback_config(self):
        assert FALLBACK_SITE_CONFIG.tie_breaker_low == 50
        assert FALLBACK_SITE_CONFIG.tie_breaker_high == 500


class TestParseCsv:

    def test_parse_sheet_rows(self):
        cfg = parse_site_config_csv(SHEET_CSV)
        assert cfg.tie_breaker_low == 100
        assert cfg.tie_breaker_high == 300
        assert cfg.stop_submit_toggle == "No"
        assert cfg.stop_submit_date_time == "2026-03-19T12:00:00-04:00"
        assert cfg.final_message_too_late == "Sorry, too late"
        assert cfg.extra["site_name"] == "Family Pool"

    def test_single_column_rejected(self):
        with pytest.raises(SiteConfigError):
            parse_site_config_csv("parameter\ntie_breaker_low\n")


class TestFetch:

    def test_fetch_parses_response(self):
        resp = Mock(text='parameter,value\ntie_breaker_low,75\n')
        resp.raise_for_status = Mock()
        with patch("ingestion.site_config.requests.get", return_value=resp) as get:
            cfg = fetch_site_config("abc123")
        assert cfg.tie_breaker_low == 75
        url = get.call_args[0][0]
        assert "abc123" in url and "format=csv" in url

    def test_http_error_wrapped(self):
        resp = Mock()
        resp.raise_for_status.side_effect = requests.HTTPError("404")
        with patch("ingestion.site_config.requests.get", return_value=resp):
            with pytest.raises(SiteConfigError, match="404"):
                fetch_site_config("abc123")

    def test_no_sheet_id(self):
        with pytest.raises(SiteConfigError, match="no sheet id"):
            fetch_site_config("")


def test_load_from_json(tmp_path):
    path = tmp_path / "site.json"
    path.write_text(json.dumps({"tieBreakerLow": 10, "stopSubmitDateTime": "2026-03-19"}))
    cfg = load_site_config_from_json(str(path))
    assert cfg.tie_breaker_low == 10
    assert cfg.stop_submit_date_time == "2026-03-19"
