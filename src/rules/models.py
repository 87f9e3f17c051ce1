from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from src.components.arithmetic import ArithmeticConfig


class ArithmeticRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    division_scale: int = Field(default=10, ge=0, le=50)
    rounding: Literal["half_up", "half_even", "down"] = "half_up"

    def to_config(self) -> ArithmeticConfig:
        return ArithmeticConfig(division_scale=self.division_scale, rounding=self.rounding)

class DisplayRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = "Calculator"
    theme: Literal["light", "dark"] = "dark"

class LoggingRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

class Rules(BaseModel):
    arithmetic: ArithmeticRules = Field(default_factory=ArithmeticRules)
    display: DisplayRules = Field(default_factory=DisplayRules)
    logging: LoggingRules = Field(default_factory=LoggingRules)
