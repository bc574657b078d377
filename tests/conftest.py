import pytest

from country_search.models.country import Country
from country_search.services.country_list_controller import CountryListController


@pytest.fixture
def sample_countries() -> list[Country]:
    return [
        Country(name="United States of America", code="US", capital="Washington, D.C.", region="NA"),
        Country(name="Uruguay", code="UY", capital="Montevideo", region="SA"),
        Country(name="India", code="IN", capital="New Delhi", region="Asia"),
    ]


@pytest.fixture
def controller(sample_countries) -> CountryListController:
    ctrl = CountryListController()
    ctrl.set_countries(sample_countries)
    return ctrl


@pytest.fixture
def notifications(controller) -> list[int]:
    calls: list[int] = []
    controller.subscribe(lambda: calls.append(controller.visible_count()))
    return calls
