import pytest

from influxdb2.models.flux_ast import Annotations, File, Package
from influxdb2.models.query import (
    AnalyzeQueryResponse,
    AnalyzeQueryResponseErrors,
    AstResponse,
    FluxSuggestion,
    FluxSuggestions,
    LanguageRequest,
    Query,
    QueryType,
)


def test_default_dialect_annotations():
    query = Query("from(bucket: \"b\")")
    assert query.dialect.annotations == [
        Annotations.DATATYPE,
        Annotations.GROUP,
        Annotations.DEFAULT,
    ]
    assert query.to_dict()["dialect"]["annotations"] == ["datatype", "group", "default"]


def test_default_query_is_empty():
    assert Query().query == ""


def test_missing_dialect_stays_unset_on_input():
    query = Query.from_dict({"query": "q"})
    assert query.dialect is None
    assert query.to_dict() == {"query": "q"}


def test_round_trip_with_type_and_extern():
    query = Query("q", extern=File(name="f"), type=QueryType.FLUX, now="now")
    data = query.to_dict()
    assert data["type"] == "flux"
    assert data["extern"] == {"name": "f"}
    assert Query.from_json(query.to_json()) == query


def test_missing_query_is_an_error():
    with pytest.raises(ValueError):
        Query.from_dict({"type": "flux"})


def test_unknown_query_type_is_an_error():
    with pytest.raises(ValueError):
        Query.from_dict({"query": "q", "type": "sql"})


def test_language_request_round_trip_and_required():
    request = LanguageRequest("q")
    assert request.to_dict() == {"query": "q"}
    assert LanguageRequest.from_dict({"query": "q"}) == request
    with pytest.raises(ValueError):
        LanguageRequest.from_dict({})


def test_analyze_response_round_trip():
    data = {"errors": [{"line": 1, "column": 2, "character": 3, "message": "bad"}]}
    response = AnalyzeQueryResponse.from_dict(data)
    assert response.errors[0] == AnalyzeQueryResponseErrors(1, 2, 3, "bad")
    assert response.to_dict() == data


def test_empty_analyze_response():
    assert AnalyzeQueryResponse().to_dict() == {}
    assert AnalyzeQueryResponse.from_dict({}).errors == []


def test_flux_suggestions_round_trip():
    suggestions = FluxSuggestions([FluxSuggestion("range", {"start": "time"})])
    restored = FluxSuggestions.from_json(suggestions.to_json())
    assert restored == suggestions
    assert restored.funcs[0].params == {"start": "time"}


def test_ast_response_round_trip():
    response = AstResponse(Package(package="main", files=[File(name="f")]))
    restored = AstResponse.from_json(response.to_json())
    assert restored == response
    assert restored.ast.files[0].name == "f"