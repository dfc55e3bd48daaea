"""Integration tests for API endpoints"""

import pytest
from fastapi.testclient import TestClient


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["service"] == "fintrack-calculators"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    client.post(
        "/v1/calculators/loan",
        json={"principal": 100000, "annual_rate_percent": 8, "term_years": 5},
    )
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "fintrack_calculation_total" in response.text


def test_request_id_is_echoed(client: TestClient):
    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"

    generated = client.get("/health")
    assert generated.headers["X-Request-ID"]


def test_loan_endpoint(client: TestClient):
    response = client.post(
        "/v1/calculators/loan",
        json={"principal": 100000, "annual_rate_percent": 8, "term_years": 5, "currency": "USD"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["currency"] == "USD"
    assert data["payments_count"] == 60
    assert data["monthly_payment"] == pytest.approx(2027.64, abs=0.01)
    assert data["total_interest"] == pytest.approx(data["total_payment"] - 100000, abs=0.02)
    assert data["display"]["monthly_payment"] == "$2,027.64"
    assert data["schedule"] is None


def test_loan_endpoint_accepts_typed_amounts(client: TestClient):
    """Strings with symbols go through the same normalization as numbers"""
    response = client.post(
        "/v1/calculators/loan",
        json={"principal": "₹1,00,000", "annual_rate_percent": "8%", "term_years": "5 years"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["currency"] == "INR"
    assert data["monthly_payment"] == pytest.approx(2027.64, abs=0.01)
    assert data["display"]["monthly_payment"] == "₹2,028"


def test_loan_endpoint_eur_rates_use_dot_decimal(client: TestClient):
    """Only money fields follow the currency's separators; "7.5" is 7.5% under EUR"""
    eur = client.post(
        "/v1/calculators/loan",
        json={"principal": "100.000,00 €", "annual_rate_percent": "7.5", "term_years": "10", "currency": "EUR"},
    )
    usd = client.post(
        "/v1/calculators/loan",
        json={"principal": 100000, "annual_rate_percent": 7.5, "term_years": 10, "currency": "USD"},
    )

    assert eur.status_code == 200
    assert eur.json()["monthly_payment"] == pytest.approx(usd.json()["monthly_payment"], abs=0.001)
    assert eur.json()["monthly_payment"] == pytest.approx(1187.02, abs=0.01)


def test_retirement_endpoint_eur_typed_rates(client: TestClient):
    response = client.post(
        "/v1/calculators/retirement",
        json={
            "current_age": "30",
            "retirement_age": "60",
            "monthly_expenses": "2.000,00 €",
            "inflation_rate_percent": "2.5",
            "expected_return_rate_percent": "6.5",
            "currency": "EUR",
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["inflated_monthly_expense"] == pytest.approx(2000 * 1.025 ** 30, abs=0.01)


def test_loan_endpoint_with_schedule(client: TestClient):
    response = client.post(
        "/v1/calculators/loan",
        json={"principal": 12000, "annual_rate_percent": 0, "term_years": 1, "include_schedule": True},
    )

    assert response.status_code == 200
    schedule = response.json()["schedule"]
    assert len(schedule) == 12
    assert all(entry["payment"] == 1000 for entry in schedule)
    assert schedule[-1]["balance"] == 0


def test_loan_endpoint_unparseable_principal(client: TestClient):
    """Garbage normalizes to 0, which then fails the positive-principal rule"""
    response = client.post(
        "/v1/calculators/loan",
        json={"principal": "lots", "annual_rate_percent": 8, "term_years": 5},
    )
    assert response.status_code == 422


def test_savings_endpoint(client: TestClient):
    response = client.post(
        "/v1/calculators/savings",
        json={
            "initial_deposit": 10000,
            "monthly_contribution": 1000,
            "annual_rate_percent": 7,
            "years": 10,
            "compounding_periods_per_year": 12,
            "include_projection": True,
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["total_contributions"] == 130000
    assert data["future_value"] > data["total_contributions"]
    assert data["interest_earned"] == pytest.approx(data["future_value"] - 130000, abs=0.02)
    assert len(data["projection"]) == 10
    assert data["projection"][-1]["balance"] == pytest.approx(data["future_value"], abs=0.01)


def test_savings_endpoint_rejects_quarterly_compounding(client: TestClient):
    response = client.post(
        "/v1/calculators/savings",
        json={
            "initial_deposit": 10000,
            "monthly_contribution": 1000,
            "annual_rate_percent": 7,
            "years": 10,
            "compounding_periods_per_year": 4,
        },
    )
    assert response.status_code == 422


def test_retirement_endpoint(client: TestClient):
    response = client.post(
        "/v1/calculators/retirement",
        json={
            "current_age": 30,
            "retirement_age": 60,
            "monthly_expenses": 50000,
            "inflation_rate_percent": 6,
            "expected_return_rate_percent": 12,
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["years_to_retirement"] == 30
    assert data["inflated_monthly_expense"] == pytest.approx(50000 * 1.06 ** 30, abs=0.01)
    assert data["required_corpus"] == pytest.approx(50000 * 1.06 ** 30 * 300, abs=0.05)
    assert data["monthly_investment_required"] > 0


def test_retirement_endpoint_reversed_ages(client: TestClient):
    response = client.post(
        "/v1/calculators/retirement",
        json={
            "current_age": 60,
            "retirement_age": 40,
            "monthly_expenses": 50000,
            "inflation_rate_percent": 6,
            "expected_return_rate_percent": 12,
        },
    )

    assert response.status_code == 422
    assert response.json()["detail"]["code"] == "invalid_parameters"


def test_payoff_endpoint(client: TestClient):
    response = client.post(
        "/v1/calculators/payoff",
        json={"current_balance": 50000, "annual_interest_rate_percent": 36, "fixed_monthly_payment": 5000},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["paid_off"] is True
    assert data["months_to_payoff"] < 20
    assert data["total_amount_paid"] == pytest.approx(50000 + data["total_interest_paid"], abs=0.02)


def test_payoff_endpoint_payment_too_low(client: TestClient):
    """Payment below first month's interest is reported, not simulated"""
    response = client.post(
        "/v1/calculators/payoff",
        json={"current_balance": 50000, "annual_interest_rate_percent": 36, "fixed_monthly_payment": 1000},
    )

    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["code"] == "payment_insufficient"
    assert "1500.00" in detail["message"]


def test_tax_endpoint(client: TestClient):
    response = client.post(
        "/v1/calculators/tax",
        json={"annual_income": 600000, "regime": "new", "age_band": "general"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["base_tax"] == 15000
    assert data["surcharge"] == 600
    assert data["tax_amount"] == 15600
    assert data["effective_rate_percent"] == 2.6
    assert [s["rate_percent"] for s in data["slices"]] == [0, 5]
    assert data["display"]["tax_amount"] == "₹15,600"


def test_tax_endpoint_unknown_regime(client: TestClient):
    response = client.post(
        "/v1/calculators/tax",
        json={"annual_income": 600000, "regime": "flat", "age_band": "general"},
    )

    assert response.status_code == 422
    assert response.json()["detail"]["code"] == "unknown_tax_schedule"


def test_list_currencies(client: TestClient):
    response = client.get("/v1/currencies")

    assert response.status_code == 200
    codes = {c["code"] for c in response.json()}
    assert {"USD", "EUR", "GBP", "INR", "JPY", "CAD", "AUD"} <= codes


def test_parse_endpoint_never_fails(client: TestClient):
    response = client.post("/v1/currency/parse", json={"raw": "$1,234.56", "currency": "USD"})
    assert response.status_code == 200
    assert response.json()["amount"] == 1234.56

    garbage = client.post("/v1/currency/parse", json={"raw": "not money"})
    assert garbage.status_code == 200
    assert garbage.json()["amount"] == 0
    assert garbage.json()["currency"] == "INR"


def test_format_endpoint(client: TestClient):
    response = client.post("/v1/currency/format", json={"amount": 1234567, "currency": "EUR"})

    assert response.status_code == 200
    assert response.json()["formatted"] == "1.234.567,00 €"


def test_convert_endpoint(client: TestClient):
    response = client.post(
        "/v1/currency/convert",
        json={"amount": 100, "from_currency": "usd", "to_currency": "INR"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["rate"] == 83.5
    assert data["converted"] == 8350
    assert data["display"] == {"amount": "$100.00", "converted": "₹8,350"}


def test_convert_endpoint_unsupported_pair(client: TestClient):
    response = client.post(
        "/v1/currency/convert",
        json={"amount": 100, "from_currency": "AUD", "to_currency": "INR"},
    )

    assert response.status_code == 422
    assert response.json()["detail"]["code"] == "unsupported_conversion"
