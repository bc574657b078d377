from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Country(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    code: str = Field(validation_alias=AliasChoices("code", "alpha2Code"))
    capital: str
    region: str

    def matches(self, query: str) -> bool:
        """True if the lowercased name or capital contains ``query``.

        ``query`` is expected to be lowercased already.
        """
        return query in self.name.lower() or query in self.capital.lower()


class CountryRow(BaseModel):
    index: int
    title: str
    subtitle: str
    code: str

    @classmethod
    def from_country(cls, index: int, country: Country) -> "CountryRow":
        return cls(
            index=index,
            title=f"{country.name}, {country.region}",
            subtitle=country.capital,
            code=country.code,
        )


class CountryListResponse(BaseModel):
    count: int
    query: str = ""
    search_active: bool = False
    items: list[CountryRow] = []


class SearchRequest(BaseModel):
    query: str = ""
    active: bool | None = None
