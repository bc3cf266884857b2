import pytest
import requests
import responses

from pokedexcli.api import BASE_URL, ApiError, Client, fetch_data
from pokedexcli.models import PokemonStat

LOCATIONS_URL = BASE_URL + "/location-area"
PAGE = {
    "count": 2,
    "next": "https://pokeapi.co/api/v2/location-area?offset=20&limit=20",
    "previous": None,
    "results": [{"name": "canalave-city-area", "url": "x"}, {"name": "eterna-city-area", "url": "y"}],
}


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def client():
    with Client(timeout=1.0, cache_interval=60.0) as instance:
        yield instance


def test_client_requests_the_public_api(mocked, client):
    mocked.add(
        responses.GET,
        "https://pokeapi.co/api/v2/pokemon/ditto",
        json={"name": "ditto", "base_experience": 101},
    )
    pokemon = client.get_pokemon_data("ditto")
    assert pokemon.name == "ditto"
    assert mocked.calls[0].request.url == "https://pokeapi.co/api/v2/pokemon/ditto"


def test_fetch_data_returns_body(mocked):
    mocked.add(responses.GET, "https://example.com/data", body=b"payload")
    with requests.Session() as session:
        assert fetch_data("https://example.com/data", session, 1.0) == b"payload"


def test_fetch_data_rejects_error_status(mocked):
    mocked.add(responses.GET, "https://example.com/missing", status=404)
    with requests.Session() as session, pytest.raises(ApiError, match="Cannot find the searched item"):
        fetch_data("https://example.com/missing", session, 1.0)


def test_fetch_data_bad_url():
    with requests.Session() as session, pytest.raises(ApiError, match="Cannot create the http request"):
        fetch_data("not a url", session, 1.0)


def test_fetch_data_connection_failure(mocked):
    with requests.Session() as session, pytest.raises(
        ApiError, match="Cannot create the response element"
    ):
        fetch_data("https://example.com/unregistered", session, 1.0)


def test_get_locations_first_page(mocked, client):
    mocked.add(responses.GET, LOCATIONS_URL, json=PAGE)
    page = client.get_locations()
    assert page.results == ["canalave-city-area", "eterna-city-area"]
    assert page.next == PAGE["next"]
    assert page.previous == ""


def test_get_locations_uses_page_url(mocked, client):
    mocked.add(responses.GET, PAGE["next"], json={"count": 2, "results": [{"name": "later-area"}]})
    page = client.get_locations(PAGE["next"])
    assert page.results == ["later-area"]


def test_get_locations_is_cached(mocked, client):
    mocked.add(responses.GET, LOCATIONS_URL, json=PAGE)
    first = client.get_locations()
    second = client.get_locations()
    assert first == second
    assert len(mocked.calls) == 1


def test_get_locations_bad_json(mocked, client):
    mocked.add(responses.GET, LOCATIONS_URL, body=b"not json")
    with pytest.raises(ApiError, match="Cannot unmarshal the data"):
        client.get_locations()


def test_explore_location(mocked, client):
    mocked.add(
        responses.GET,
        BASE_URL + "/location-area/pastoria-city-area",
        json={
            "name": "pastoria-city-area",
            "pokemon_encounters": [{"pokemon": {"name": "tentacool"}}],
        },
    )
    area = client.explore_location("pastoria-city-area")
    assert area.name == "pastoria-city-area"
    assert area.pokemon == ["tentacool"]


def test_explore_unknown_location(mocked, client):
    mocked.add(responses.GET, BASE_URL + "/location-area/nowhere", status=404)
    with pytest.raises(ApiError, match="Unable to fetch the data for location 'nowhere'"):
        client.explore_location("nowhere")


def test_get_pokemon_data(mocked, client):
    mocked.add(
        responses.GET,
        BASE_URL + "/pokemon/pikachu",
        json={
            "name": "pikachu",
            "base_experience": 112,
            "height": 4,
            "weight": 60,
            "stats": [{"base_stat": 35, "stat": {"name": "hp"}}],
            "abilities": [{"ability": {"name": "static"}}],
            "types": [{"type": {"name": "electric"}}],
        },
    )
    pokemon = client.get_pokemon_data("pikachu")
    assert pokemon.name == "pikachu"
    assert pokemon.base_experience == 112
    assert pokemon.stats == [PokemonStat("hp", 35)]
    assert pokemon.types == ["electric"]


def test_get_unknown_pokemon(mocked, client):
    mocked.add(responses.GET, BASE_URL + "/pokemon/agumon", status=404)
    with pytest.raises(ApiError, match="'agumon'") as excinfo:
        client.get_pokemon_data("agumon")
    assert "Cannot find the searched item" in str(excinfo.value)


def test_failed_fetch_is_not_cached(mocked, client):
    url = BASE_URL + "/pokemon/eevee"
    mocked.add(responses.GET, url, status=500)
    with pytest.raises(ApiError):
        client.get_pokemon_data("eevee")
    mocked.replace(responses.GET, url, json={"name": "eevee"})
    assert client.get_pokemon_data("eevee").name == "eevee"
    assert len(mocked.calls) == 2