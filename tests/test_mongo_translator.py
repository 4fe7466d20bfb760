from datetime import datetime, timezone

import pytest
from bson import ObjectId

from movie_api.adapters.mongodb import MOVIE_FIELD_TYPES, MongoQueryTranslator, TypeMapper
from movie_api.query import QueryTranslator


@pytest.fixture
def translate():
    translator = QueryTranslator(translator=MongoQueryTranslator(TypeMapper(MOVIE_FIELD_TYPES)))

    def _translate(params):
        return translator.translate(translator.build_plan(params))

    return _translate


def test_default_query(translate):
    assert translate({}) == {
        "filter": {},
        "projection": None,
        "sort": [("createdAt", -1)],
        "skip": 0,
        "limit": 10,
    }


def test_filters_are_anded(translate):
    query = translate({"rating[gte]": "8", "director": "Christopher Nolan"})

    assert query["filter"] == {"rating": {"$gte": 8}, "director": "Christopher Nolan"}


def test_range_on_one_field_is_merged(translate):
    query = translate({"rating[gte]": "5", "rating[lte]": "8.5"})

    assert query["filter"] == {"rating": {"$gte": 5, "$lte": 8.5}}


def test_equality_merged_with_range(translate):
    query = translate({"rating": "9", "rating[lt]": "10"})

    assert query["filter"] == {"rating": {"$eq": 9, "$lt": 10}}


def test_in_values_are_cast(translate):
    query = translate({"duration[in]": "120,142"})

    assert query["filter"] == {"duration": {"$in": [120, 142]}}


def test_in_on_string_field(translate):
    query = translate({"genre[in]": "Drama,Crime"})

    assert query["filter"] == {"genre": {"$in": ["Drama", "Crime"]}}


def test_dates_and_object_ids_are_cast(translate):
    user_id = ObjectId()

    query = translate({"releaseDate[gte]": "2000-01-01T00:00:00Z", "createdBy": str(user_id)})

    assert query["filter"] == {
        "releaseDate": {"$gte": datetime(2000, 1, 1, tzinfo=timezone.utc)},
        "createdBy": user_id,
    }


def test_uncastable_value_is_kept(translate):
    query = translate({"rating[gt]": "high"})

    assert query["filter"] == {"rating": {"$gt": "high"}}


def test_operator_like_fields_are_dropped(translate):
    query = translate({"$where": "sleep(1000)", "title": "Up"})

    assert query["filter"] == {"title": "Up"}


def test_search_is_escaped_case_insensitive_substring(translate):
    query = translate({"search": "dark.knight", "status": "active"})

    assert query["filter"] == {
        "status": "active",
        "$or": [
            {"title": {"$regex": r"dark\.knight", "$options": "i"}},
            {"description": {"$regex": r"dark\.knight", "$options": "i"}},
            {"director": {"$regex": r"dark\.knight", "$options": "i"}},
        ],
    }


def test_projection(translate):
    assert translate({"select": "title,rating"})["projection"] == {"title": 1, "rating": 1}
    assert translate({"select": "-cast"})["projection"] == {"cast": 0}


def test_sort_and_window(translate):
    query = translate({"sort": "-rating,title", "page": "3", "limit": "5"})

    assert query["sort"] == [("rating", -1), ("title", 1)]
    assert query["skip"] == 10
    assert query["limit"] == 5


def test_type_mapper_boolean_and_unknown_fields():
    mapper = TypeMapper({"featured": "boolean"})

    assert mapper.coerce("featured", "true") is True
    assert mapper.coerce("featured", "0") is False
    assert mapper.coerce("featured", "maybe") == "maybe"
    assert mapper.coerce("title", "42") == "42"
