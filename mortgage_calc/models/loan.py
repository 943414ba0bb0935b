from dataclasses import asdict, dataclass, fields


@dataclass(frozen=True)
class LoanParameters:
    principal: float  # Purchase price
    annual_rate_pct: float  # 3.5 means 3.5%
    term_years: float  # Whole years in practice; edits store whatever parses
    down_payment: float  # May exceed principal
    monthly_property_tax: float = 0.0
    monthly_insurance: float = 0.0

    @property
    def financed_amount(self) -> float:
        return self.principal - self.down_payment

    def to_dict(self) -> dict[str, float]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict | None) -> "LoanParameters":
        """Build from a plain dict, falling back to defaults for missing keys."""
        values = DEFAULT_LOAN_PARAMETERS.to_dict()
        for key in LOAN_FIELDS:
            if data and data.get(key) is not None:
                values[key] = data[key]
        return cls(**values)


@dataclass(frozen=True)
class AmortizationResult:
    monthly_payment: float = 0.0  # Principal & interest only
    total_payment: float = 0.0
    total_interest: float = 0.0
    monthly_with_extras: float = 0.0  # P&I + tax + insurance

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


LOAN_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(LoanParameters))

DEFAULT_LOAN_PARAMETERS = LoanParameters(
    principal=300000.0,
    annual_rate_pct=3.5,
    term_years=30,
    down_payment=60000.0,
    monthly_property_tax=0.0,
    monthly_insurance=0.0,
)
