from pydantic import BaseModel, ConfigDict, field_validator

VALID_ACCOUNT_TYPES = ["asset", "liability", "equity", "revenue", "expense"]

VALID_SUB_TYPES = [
    "current_asset",
    "fixed_asset",
    "current_liability",
    "long_term_liability",
    "owner_equity",
    "operating_revenue",
    "other_revenue",
    "operating_expense",
    "other_expense",
]

class Account(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    account_type: str  # asset, liability, equity, revenue, expense
    sub_type: str
    description: str = ""
    is_active: bool = True

    @field_validator('account_type')
    @classmethod
    def validate_account_type(cls, v):
        if v not in VALID_ACCOUNT_TYPES:
            raise ValueError(f"account_type must be one of {VALID_ACCOUNT_TYPES}")
        return v

    @field_validator('sub_type')
    @classmethod
    def validate_sub_type(cls, v):
        if v not in VALID_SUB_TYPES:
            raise ValueError(f"sub_type must be one of {VALID_SUB_TYPES}")
        return v

class AccountMapping(BaseModel):
    source: str
    account_code: str
    account_name: str
