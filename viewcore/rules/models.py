from pydantic import BaseModel, Field, field_validator

from viewcore.domain.color import Color


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class LinkRules(BaseModel):
    external_rel: str = ""
    external_schemes: list[str] = Field(default_factory=lambda: ["http", "https"])

    @field_validator("external_schemes")
    @classmethod
    def lower_schemes(cls, v: list[str]) -> list[str]:
        return [s.lower() for s in v]

class AuthRules(BaseModel):
    log_denials: bool = True

class ColorRules(BaseModel):
    default: Color = Field(default_factory=lambda: Color("#000000ff"))

class Rules(BaseModel):
    project: ProjectRules
    links: LinkRules = Field(default_factory=LinkRules)
    auth: AuthRules = Field(default_factory=AuthRules)
    colors: ColorRules = Field(default_factory=ColorRules)
