"""GraphQL schema: bond math primitives (rates are decimals)."""

import strawberry

from app import services
from app.types import DurationResult, YtmResult

API_VERSION = "0.1.0"


@strawberry.type
class Query:
    @strawberry.field
    def version(self) -> str:
        return API_VERSION

    @strawberry.field
    def solve_ytm(
        self, price: float, face_value: float, coupon_rate: float, years: float
    ) -> YtmResult:
        """Yield to maturity for a clean price (Newton-Raphson)."""
        return services.solve_ytm(price, face_value, coupon_rate, years)

    @strawberry.field
    def macaulay_duration(
        self, face_value: float, coupon_rate: float, ytm: float, years: float, price: float
    ) -> DurationResult:
        """Macaulay and modified duration."""
        return services.macaulay_duration(face_value, coupon_rate, ytm, years, price)

    @strawberry.field
    def fair_price(
        self,
        face_value: float,
        coupon_rate: float,
        required_yield: float,
        years: float,
        frequency: int = 1,
    ) -> float:
        """Present value at the required yield."""
        return services.fair_price(face_value, coupon_rate, required_yield, years, frequency)


schema = strawberry.Schema(query=Query)
