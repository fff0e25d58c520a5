from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictBool


class FakturoidCredentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str = Field(min_length=1)
    email: str = Field(min_length=1)
    api_key: str = Field(min_length=1, validation_alias=AliasChoices("api_key", "apiKey"))
    user_agent: str = Field(
        default="Fakturoid invoice generator",
        validation_alias=AliasChoices("user_agent", "userAgent"),
    )
    base_url: str = Field(
        default="https://app.fakturoid.cz/api/v2",
        validation_alias=AliasChoices("base_url", "baseUrl"),
    )


class SubjectRegistry(BaseModel):
    """Remote Fakturoid subject ids of the two billed companies."""

    model_config = ConfigDict(frozen=True)

    fcs: int
    # older config files name the BE subject after the branch
    be: int = Field(validation_alias=AliasChoices("be", "beLtdBranch"))


class InvoicingPolicy(BaseModel):
    model_config = ConfigDict(frozen=True)

    include_vat: StrictBool = Field(
        validation_alias=AliasChoices("include_vat", "includeVat")
    )


class AppConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    fakturoid: FakturoidCredentials
    subjects: SubjectRegistry
    invoicing: InvoicingPolicy
