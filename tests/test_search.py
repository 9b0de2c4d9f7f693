# ===============================================
# tests/test_search.py
# -----------------------------------------------
# Query engine: substring matching over records.
# ===============================================

from borrowers_api.search import Query, filter_records, search_borrowers, stringify

BORROWERS = [
    {"name": "Alice", "email": "a@x.com"},
    {"name": "Bob", "email": "b@y.com"},
]


def test_all_fields_match_is_case_insensitive():
    result = filter_records(BORROWERS, Query(text="alice", field="all"))
    assert result == [{"name": "Alice", "email": "a@x.com"}]


def test_result_keeps_original_objects_and_order():
    coll = [{"name": "Ann"}, {"name": "Bob"}, {"name": "Annabel"}]
    result = filter_records(coll, Query(text="ANN"))
    assert [r["name"] for r in result] == ["Ann", "Annabel"]
    assert result[0] is coll[0] and result[1] is coll[2]


def test_specific_field_only_looks_at_that_field():
    assert filter_records(BORROWERS, Query(text="x.com", field="email")) == [BORROWERS[0]]
    assert filter_records(BORROWERS, Query(text="x.com", field="name")) == []


def test_falsy_field_value_never_matches():
    assert filter_records([{"name": "Alice", "phone": 0}], Query(text="0", field="phone")) == []
    for falsy in ("", False, None, 0.0):
        assert filter_records([{"phone": falsy}], Query(text="", field="phone")) == []


def test_falsy_value_still_matches_in_all_mode():
    coll = [{"name": "Alice", "phone": 0}]
    assert filter_records(coll, Query(text="0", field="all")) == coll


def test_missing_or_unknown_field_matches_nothing():
    assert filter_records(BORROWERS, Query(text="a", field="phone")) == []
    assert filter_records(BORROWERS, Query(text="a", field="nickname")) == []


def test_empty_query_returns_everything_for_all():
    assert filter_records(BORROWERS, Query(text="")) == BORROWERS


def test_empty_collection():
    assert filter_records([], Query(text="alice")) == []


def test_refiltering_is_idempotent():
    coll = BORROWERS + [{"name": "Malice", "email": "m@x.com"}]
    q = Query(text="lic")
    once = filter_records(coll, q)
    assert filter_records(once, q) == once


def test_numbers_are_matched_as_text():
    coll = [{"name": "Carl", "loanAmount": 25000}, {"name": "Dee", "loanAmount": 1200.0}]
    assert search_borrowers(coll, "250") == [coll[0]]
    assert search_borrowers(coll, "1200", field="loanAmount") == [coll[1]]
    # integral floats render without ".0"
    assert search_borrowers(coll, "1200.0") == []


def test_missing_field_selector_defaults_to_all():
    assert Query(text="bob", field=None).field == "all"
    assert search_borrowers(BORROWERS, "y.com", field="") == [BORROWERS[1]]


def test_stringify_matches_json_text():
    assert stringify(None) == "null"
    assert stringify(True) == "true"
    assert stringify(3.5) == "3.5"
    assert stringify([1, "a", None]) == "1,a,"
    assert stringify({"k": 1}) == "[object Object]"
    assert search_borrowers([{"active": True}], "TRUE") == [{"active": True}]


def test_empty_containers_count_as_present_for_field_search():
    coll = [{"name": "Alice", "tags": {}}, {"name": "Bob", "tags": []}]
    assert search_borrowers(coll, "object", field="tags") == [coll[0]]
    assert search_borrowers(coll, "", field="tags") == coll


def test_nan_counts_as_missing_for_field_search():
    coll = [{"name": "Alice", "score": float("nan")}]
    assert search_borrowers(coll, "nan", field="score") == []


def test_non_string_field_is_read_as_its_text():
    coll = [{"name": "Alice"}, {"name": "Bob"}]
    assert search_borrowers(coll, "ali", field=["name"]) == [coll[0]]
    assert search_borrowers(coll, "ali", field={"k": 1}) == []
