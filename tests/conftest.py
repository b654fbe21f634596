"""Shared test fixtures."""

import pytest


@pytest.fixture
def flat_quote():
    return {"symbol": "AAPL", "price": 189.5, "changePercent": 1.23}


@pytest.fixture
def daily_series():
    return {
        "Meta Data": {
            "1. Information": "Daily Prices (open, high, low, close) and Volumes",
            "2. Symbol": "IBM",
            "3. Last Refreshed": "2024-01-03",
        },
        "Time Series (Daily)": {
            "2024-01-03": {
                "1. open": "102.0",
                "2. high": "104.0",
                "3. low": "101.0",
                "4. close": "103.5",
                "5. volume": "1200",
            },
            "2024-01-02": {
                "1. open": "100.0",
                "2. high": "102.5",
                "3. low": "99.5",
                "4. close": "101.5",
                "5. volume": "1000",
            },
            "2024-01-01": {
                "1. open": "99.0",
                "2. high": "100.5",
                "3. low": "98.0",
                "4. close": "100.0",
                "5. volume": "800",
            },
        },
    }


@pytest.fixture
def exchange_rates():
    return {"data": {"currency": "BTC", "rates": {"USD": "65000.12", "EUR": "60000.5"}}}


@pytest.fixture
def ipo_listing():
    return {
        "count": 2,
        "upcoming": [
            {"name": "Acme Ltd", "price_band": "100-120", "listing_date": "2024-02-01"},
            {"name": "Globex", "price_band": "45-50", "listing_date": "2024-02-09"},
        ],
    }
