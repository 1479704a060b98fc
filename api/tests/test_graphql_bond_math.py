"""Integration tests for the GraphQL bond math queries."""

from fastapi.testclient import TestClient

from app.main import app


client = TestClient(app)


def run(query: str) -> dict:
    response = client.post("/graphql", json={"query": query})
    assert response.status_code == 200
    return response.json()


def test_version():
    assert run("{ version }")["data"]["version"] == "0.1.0"


def test_solve_ytm_at_par():
    data = run(
        """
        query {
          solveYtm(price: 100, faceValue: 100, couponRate: 0.05, years: 10) {
            ytm
            iterations
            converged
          }
        }
        """
    )
    assert "errors" not in data
    result = data["data"]["solveYtm"]
    assert abs(result["ytm"] - 0.05) < 1e-12
    assert result["converged"] is True
    assert result["iterations"] == 1


def test_solve_ytm_discount_bond():
    result = run(
        "{ solveYtm(price: 95, faceValue: 100, couponRate: 0.05, years: 10) { ytm converged } }"
    )["data"]["solveYtm"]
    assert result["converged"]
    assert 0.055 < result["ytm"] < 0.06


def test_macaulay_duration_of_zero_coupon_is_maturity():
    price = 100 / 1.05**5
    data = run(
        f"""
        query {{
          macaulayDuration(faceValue: 100, couponRate: 0, ytm: 0.05, years: 5, price: {price}) {{
            macaulay
            modified
          }}
        }}
        """
    )
    result = data["data"]["macaulayDuration"]
    assert abs(result["macaulay"] - 5.0) < 1e-9
    assert abs(result["modified"] - 5.0 / 1.05) < 1e-9


def test_fair_price_semiannual():
    data = run(
        """
        query {
          fairPrice(faceValue: 100, couponRate: 0.06, requiredYield: 0.05, years: 5, frequency: 2)
        }
        """
    )
    assert abs(data["data"]["fairPrice"] - 104.376) < 1e-3


def test_fair_price_defaults_to_annual_par():
    data = run("{ fairPrice(faceValue: 100, couponRate: 0.05, requiredYield: 0.05, years: 10) }")
    assert abs(data["data"]["fairPrice"] - 100.0) < 1e-9


def test_non_positive_price_returns_error():
    data = run("{ solveYtm(price: -5, faceValue: 100, couponRate: 0.05, years: 10) { ytm } }")
    assert "errors" in data
    assert any("price must be positive" in e["message"] for e in data["errors"])


def test_fair_price_with_zero_discount_base_returns_computation_error():
    data = run("{ fairPrice(faceValue: 100, couponRate: 0.05, requiredYield: -1, years: 5) }")
    assert data["data"] is None
    assert any("discount base" in e["message"] for e in data["errors"])


def test_fair_price_with_complex_power_returns_computation_error():
    data = run(
        "{ fairPrice(faceValue: 100, couponRate: 0.05, requiredYield: -3, years: 10.25, frequency: 2) }"
    )
    assert any("discount base" in e["message"] for e in data["errors"])


def test_solver_overflow_returns_computation_error():
    data = run("{ solveYtm(price: 95, faceValue: 100, couponRate: 0.05, years: 100000) { ytm } }")
    assert any("solveYtm computation failed" in e["message"] for e in data["errors"])


def test_duration_with_zero_discount_base_returns_computation_error():
    data = run(
        "{ macaulayDuration(faceValue: 100, couponRate: 0.05, ytm: -1, years: 5, price: 95) { macaulay } }"
    )
    assert any("discount base" in e["message"] for e in data["errors"])
