"""
REST request payloads.

Field names follow the camelCase keys posted by the calculator pages. The
`calculate/*` payloads carry rates as percentages (5 = 5%); the smart
evaluator payload carries decimals.
"""

from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, BaseModel, Field


class _Payload(BaseModel):
    model_config = {"populate_by_name": True}


class ScreenerPayload(_Payload):
    face_value: float = Field(alias="faceValue")
    market_price: float = Field(alias="marketPrice")
    coupon_rate: float = Field(alias="couponRate")
    years_to_maturity: float = Field(alias="yearsToMaturity")
    inflation: float
    risk_free_ytm: float = Field(alias="riskFreeYTM")
    bond_rating: str = Field(alias="bondRating")
    holding_period: float = Field(alias="holdingPeriod")
    trading_volume: float = Field(alias="tradingVolume")
    currency_depreciation: float = Field(0.0, alias="currencyDepreciation")
    home_inflation: float = Field(0.0, alias="homeInflation")
    is_callable: bool = Field(False, alias="isCallable")


class ScreenerProPayload(_Payload):
    bond_price: float = Field(alias="bondPrice")
    face_value: float = Field(alias="faceValue")
    coupon_rate: float = Field(alias="couponRate")
    years_to_maturity: float = Field(alias="yearsToMaturity")
    ytm: float
    current_yield: float = Field(alias="currentYield")
    treasury_ytm: float = Field(alias="treasuryYTM")
    inflation: float
    duration: float
    holding_period: float = Field(alias="holdingPeriod")
    trading_volume: float = Field(alias="tradingVolume")
    credit_rating: str = Field(alias="creditRating")
    coupon_type: str = Field("fixed", alias="couponType")
    is_callable: bool = Field(False, alias="isCallable")


class ValuationPayload(_Payload):
    bond_price: float = Field(alias="bondPrice")
    face_value: float = Field(alias="faceValue")
    coupon_rate: float = Field(alias="couponRate")
    years_to_maturity: float = Field(alias="yearsToMaturity")
    ytm: float
    required_yield: float = Field(alias="requiredYield")
    frequency: float = 2
    credit_rating: str = Field(alias="creditRating")
    coupon_type: str = Field("fixed", alias="couponType")
    is_callable: bool = Field(False, alias="isCallable")
    liquidity: str = "tight"
    currency_risk: str = Field("none", alias="currencyRisk")
    holding_plan: str = Field("maturity", alias="holdingPlan")


class CompletePayload(_Payload):
    bond_price: float = Field(alias="bondPrice")
    face_value: float = Field(alias="faceValue")
    coupon_rate: float = Field(alias="couponRate")
    years_to_maturity: float = Field(alias="yearsToMaturity")
    ytm: float
    inflation: float
    risk_free_ytm: float = Field(alias="riskFreeYTM")
    bond_rating: str = Field(alias="bondRating")
    duration: float
    holding_period: float = Field(alias="holdingPeriod")
    trading_volume: float = Field(alias="tradingVolume")
    currency_depreciation: float = Field(0.0, alias="currencyDepreciation")
    home_inflation: float = Field(0.0, alias="homeInflation")
    is_callable: bool = Field(False, alias="isCallable")


class FlowchartPayload(_Payload):
    bond_price: float = Field(alias="bondPrice")
    face_value: float = Field(alias="faceValue")
    coupon_rate: float = Field(alias="couponRate")
    years_to_maturity: float = Field(alias="yearsToMaturity")
    required_yield: float = Field(alias="requiredYield")
    credit_spread: float = Field(alias="creditSpread")
    coupon_type: str = Field("fixed", alias="couponType")
    duration_match: str = Field("good", alias="durationMatch")
    is_callable: bool = Field(False, alias="isCallable")
    # Posted by the flowchart page; no gate reads it.
    rate_outlook: Optional[str] = Field(None, alias="rateOutlook")


class SmartEvaluatorPayload(_Payload):
    mode: str
    dirty_price: float = Field(alias="dirtyPrice")
    ytm: Optional[float] = None
    coupon_type: str = Field(alias="couponType")
    maturity_date: str = Field(alias="maturityDate")
    fitch_rating: str = Field(alias="fitchRating")
    modified_duration: float = Field(alias="modifiedDuration")
    coupon_rate: float = Field(0.0, alias="couponRate")
    inflation_rate: float = Field(0.0, alias="inflationRate")
    currency_dev: float = Field(0.0, alias="currencyDev")
    risk_free_rate: float = Field(0.0, alias="riskFreeRate")
    face_value: float = Field(100.0, alias="faceValue")
    accrued_interest: float = Field(0.0, alias="accruedInterest")
    day_high: Optional[float] = Field(None, alias="dayPriceHigh")
    day_low: Optional[float] = Field(None, alias="dayPriceLow")
    year_price_high: Optional[float] = Field(
        None, validation_alias=AliasChoices("yearPriceHigh", "priceYearHigh", "year_price_high")
    )
    year_price_low: Optional[float] = Field(
        None, validation_alias=AliasChoices("yearPriceLow", "priceYearLow", "year_price_low")
    )
    year_yield_high: Optional[float] = Field(None, alias="yearYieldHigh")
    year_yield_low: Optional[float] = Field(None, alias="yearYieldLow")
    purchase_price: Optional[float] = Field(None, alias="purchasePrice")
    current_investment: Optional[float] = Field(None, alias="currentInvestment")
    as_of: Optional[str] = Field(None, alias="asOf")
    percentile_basis: Optional[str] = Field(None, alias="percentileBasis")
