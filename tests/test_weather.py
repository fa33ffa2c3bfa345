"""Unit tests for the weather adapter, code table and handler."""

import http.client
import urllib.error

import pytest

from core.formatting import format_number
from core.models import Failed, Fetched, WeatherArgs, WeatherResult
from core.weather import (
    UNKNOWN_WEATHER,
    WEATHER_DESCRIPTIONS,
    build_forecast_url,
    describe_weather_code,
    fetch_current_weather,
    get_weather,
    parse_current,
)

EXPECTED_CODES = {
    0, 1, 2, 3, 45, 48, 51, 53, 55, 56, 57, 61, 63, 65, 66, 67,
    71, 73, 75, 77, 80, 81, 82, 85, 86, 95, 96, 99,
}


class TestWeatherCodes:
    def test_table_covers_exactly_the_wmo_codes(self):
        assert set(WEATHER_DESCRIPTIONS) == EXPECTED_CODES

    def test_clear_sky(self):
        assert describe_weather_code(0) == "맑음"

    def test_thunderstorm_with_heavy_hail(self):
        assert describe_weather_code(99) == "강한 우박과 함께하는 뇌우"

    @pytest.mark.parametrize("code", [999, 4, -1, 2.5, "0", True, None, [0]])
    def test_unknown_code(self, code):
        assert describe_weather_code(code) == UNKNOWN_WEATHER == "알 수 없음"

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            WEATHER_DESCRIPTIONS[999] = "?"


class TestFormatNumber:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (20.0, "20"),
            (126.9780, "126.978"),
            (37.5665, "37.5665"),
            (-0.5, "-0.5"),
            (45, "45"),
            (0.0, "0"),
            (0.00001, "0.00001"),
            (1e-7, "1e-7"),
            (-2.5e-8, "-2.5e-8"),
            (1e16, "10000000000000000"),
            (1e21, "1e+21"),
            (1.5e21, "1.5e+21"),
            (float("inf"), "Infinity"),
        ],
    )
    def test_matches_javascript_rendering(self, value, expected):
        assert format_number(value) == expected


class TestForecastRequest:
    def test_url_requests_current_fields_and_auto_timezone(self):
        url = build_forecast_url(37.5665, 126.978)
        assert url == (
            "https://api.open-meteo.com/v1/forecast?latitude=37.5665&longitude=126.978"
            "&current=temperature_2m,weather_code,relative_humidity_2m,wind_speed_10m"
            "&timezone=auto"
        )

    def test_single_get(self, upstream, clear_sky_forecast):
        upstream.reply(clear_sky_forecast)
        fetch_current_weather(37.5665, 126.978)
        assert len(upstream.requests) == 1
        assert upstream.last_url == build_forecast_url(37.5665, 126.978)


class TestParseCurrent:
    def test_parses_current_block(self, clear_sky_forecast):
        assert parse_current(clear_sky_forecast) == WeatherResult(21.3, 0, 45, 7.2)

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            None,
            {"current": None},
            {"current": {}},
            {"current": {"temperature_2m": 10.0, "weather_code": 1}},
            [],
        ],
    )
    def test_missing_current_is_unavailable(self, payload):
        assert parse_current(payload) is None


class TestFetchCurrentWeather:
    def test_success(self, upstream, clear_sky_forecast):
        upstream.reply(clear_sky_forecast)
        assert fetch_current_weather(37.5665, 126.978) == Fetched(WeatherResult(21.3, 0, 45, 7.2))

    def test_http_error(self, upstream):
        upstream.fail_status(500, "Internal Server Error")
        assert fetch_current_weather(0.0, 0.0) == Failed("Weather API error: 500")

    def test_network_error(self, upstream):
        upstream.fail(urllib.error.URLError("timed out"))
        assert fetch_current_weather(0.0, 0.0) == Failed("timed out")

    @pytest.mark.parametrize(
        "exc",
        [http.client.IncompleteRead(b"{", 100), http.client.BadStatusLine("garbage")],
    )
    def test_broken_http_response(self, upstream, exc):
        upstream.fail(exc)
        assert isinstance(fetch_current_weather(0.0, 0.0), Failed)


class TestWeatherHandler:
    def test_summary(self, upstream, clear_sky_forecast):
        upstream.reply(clear_sky_forecast)
        envelope = get_weather(WeatherArgs(latitude=37.5665, longitude=126.978))
        assert envelope.text == (
            "위치: 위도 37.5665, 경도 126.978\n"
            "날씨: 맑음\n"
            "온도: 21.3°C\n"
            "습도: 45%\n"
            "풍속: 7.2 km/h"
        )

    def test_unknown_code_in_summary(self, upstream, clear_sky_forecast):
        clear_sky_forecast["current"]["weather_code"] = 999
        upstream.reply(clear_sky_forecast)
        envelope = get_weather(WeatherArgs(latitude=37.5665, longitude=126.978))
        assert "날씨: 알 수 없음" in envelope.text

    def test_missing_current_is_unavailable_not_error(self, upstream):
        upstream.reply({"latitude": 10.0, "longitude": 20.0})
        envelope = get_weather(WeatherArgs(latitude=10.0, longitude=20.5))
        assert envelope.text == "위도 10, 경도 20.5 위치의 날씨 정보를 가져올 수 없습니다."
        assert "오류" not in envelope.text

    def test_http_error_uses_error_branch(self, upstream):
        upstream.fail_status(502, "Bad Gateway")
        envelope = get_weather(WeatherArgs(latitude=10.0, longitude=20.0))
        assert envelope.text == "날씨 정보를 가져오는 중 오류가 발생했습니다: Weather API error: 502"

    def test_bad_status_line_uses_error_branch(self, upstream):
        upstream.fail(http.client.BadStatusLine("garbage"))
        envelope = get_weather(WeatherArgs(latitude=10.0, longitude=20.0))
        assert envelope.text == "날씨 정보를 가져오는 중 오류가 발생했습니다: garbage"

    def test_infinite_weather_code_is_unknown(self, upstream):
        upstream.reply_raw(
            b'{"current": {"temperature_2m": 1.5, "weather_code": 1e999,'
            b' "relative_humidity_2m": 40, "wind_speed_10m": 3}}'
        )
        envelope = get_weather(WeatherArgs(latitude=10.0, longitude=20.0))
        assert "날씨: 알 수 없음" in envelope.text

    def test_fractional_weather_code_is_unknown(self, upstream, clear_sky_forecast):
        clear_sky_forecast["current"]["weather_code"] = 2.5
        upstream.reply(clear_sky_forecast)
        envelope = get_weather(WeatherArgs(latitude=37.5665, longitude=126.978))
        assert "날씨: 알 수 없음" in envelope.text

    def test_integral_float_weather_code_is_looked_up(self, upstream, clear_sky_forecast):
        clear_sky_forecast["current"]["weather_code"] = 3.0
        upstream.reply(clear_sky_forecast)
        envelope = get_weather(WeatherArgs(latitude=37.5665, longitude=126.978))
        assert "날씨: 흐림" in envelope.text

    def test_malformed_json_uses_error_branch(self, upstream):
        upstream.reply_raw(b"not json")
        envelope = get_weather(WeatherArgs(latitude=10.0, longitude=20.0))
        assert envelope.text.startswith("날씨 정보를 가져오는 중 오류가 발생했습니다: ")
