import pytest

from core.domain.errors import InvalidCriteriaError
from core.domain.models import FilterCriteria, QueryPolicy
from core.query_builder import QueryBuilder

BASE = "https://public.opendatasoft.com/api/records/1.0/search/?dataset=all-vehicles-model&q="


def _clauses(url: str) -> list[str]:
    return url[len(BASE):].split("&")[1:]


def test_defaults_only_rows_clause():
    url = QueryBuilder().build(FilterCriteria())
    assert url == BASE + "&rows=10"
    assert "refine." not in url
    assert "sort=" not in url


@pytest.mark.parametrize(
    "criteria, clause",
    [
        (FilterCriteria(sort_field="year"), "sort=year"),
        (FilterCriteria(make="Honda"), "refine.make=Honda"),
        (FilterCriteria(model="Civic"), "refine.model=Civic"),
        (FilterCriteria(year=2015), "refine.year=2015"),
        (FilterCriteria(cylinders=6), "refine.cylinders=6"),
    ],
)
def test_each_clause_in_isolation(criteria, clause):
    clauses = _clauses(QueryBuilder().build(criteria))
    assert clauses == ["rows=10", clause]


def test_result_limit_replaces_default_rows():
    assert _clauses(QueryBuilder().build(FilterCriteria(result_limit=25))) == ["rows=25"]


def test_all_clauses_in_fixed_order():
    criteria = FilterCriteria(
        make="Audi", model="A4", sort_field="make", year=2010, cylinders=4, result_limit=3
    )
    assert _clauses(QueryBuilder().build(criteria)) == [
        "rows=3",
        "sort=make",
        "refine.make=Audi",
        "refine.model=A4",
        "refine.year=2010",
        "refine.cylinders=4",
    ]


def test_honda_scenario():
    criteria = FilterCriteria(
        make="Honda", model="", sort_field="year", year=2015, cylinders=4, result_limit=5
    )
    url = QueryBuilder().build(criteria)
    for clause in ("rows=5", "sort=year", "refine.make=Honda", "refine.year=2015", "refine.cylinders=4"):
        assert clause in _clauses(url)
    assert "refine.model" not in url


def test_free_text_is_not_escaped_by_default():
    url = QueryBuilder().build(FilterCriteria(make="Land Rover"))
    assert url.endswith("&refine.make=Land Rover")


def test_free_text_escaping_is_opt_in():
    builder = QueryBuilder(QueryPolicy(escape_free_text=True))
    url = builder.build(FilterCriteria(make="Land Rover", model="A&B"))
    assert "refine.make=Land%20Rover" in url
    assert "refine.model=A%26B" in url


def test_policy_overrides_base_and_default_rows():
    policy = QueryPolicy(base_url="http://api.test/search/", dataset="cars", default_rows=7)
    assert QueryBuilder(policy).build(FilterCriteria()) == "http://api.test/search/?dataset=cars&q=&rows=7"


@pytest.mark.parametrize(
    "criteria, field",
    [
        (FilterCriteria(year=1979), "year"),
        (FilterCriteria(year=2026), "year"),
        (FilterCriteria(cylinders=7), "cylinders"),
        (FilterCriteria(result_limit=51), "result_limit"),
        (FilterCriteria(result_limit=-1), "result_limit"),
        (FilterCriteria(sort_field="price"), "sort_field"),
    ],
)
def test_validate_rejects_out_of_policy(criteria, field):
    with pytest.raises(InvalidCriteriaError) as excinfo:
        QueryBuilder().build_validated(criteria)
    assert excinfo.value.field == field


def test_validate_accepts_unset_and_boundaries():
    builder = QueryBuilder()
    builder.validate(FilterCriteria())
    builder.validate(FilterCriteria(year=1980, cylinders=16, result_limit=50, sort_field="cylinders"))
    builder.validate(FilterCriteria(year=2025, cylinders=3))


def test_build_itself_does_not_validate():
    url = QueryBuilder().build(FilterCriteria(sort_field="price", cylinders=7))
    assert "sort=price" in url
    assert "refine.cylinders=7" in url
