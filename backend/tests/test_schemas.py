"""
Blog Post API — Schema Tests
==============================

What:  Request validation rules and the public-view flattening.

What we test:
    ✅ PostCreate requires author.firstName, author.lastName, title, content
    ✅ PostCreate.created is normalized to UTC
    ✅ PostUpdate accepts any subset but rejects explicit nulls
    ✅ PostUpdate.changes() only returns supplied updatable fields
    ✅ PostView joins the author name parts
"""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError as PydanticValidationError

from app.schemas.post import PostCreate, PostUpdate, PostView


VALID_BODY = {
    "author": {"firstName": "Ada", "lastName": "Lovelace"},
    "title": "Notes",
    "content": "Body text",
}


class TestPostCreate:

    def test_valid_body(self):
        payload = PostCreate(**VALID_BODY)
        assert payload.created is None
        assert payload.to_document() == VALID_BODY

    @pytest.mark.parametrize("missing", ["title", "content", "author"])
    def test_missing_top_level_field_rejected(self, missing):
        body = {k: v for k, v in VALID_BODY.items() if k != missing}
        with pytest.raises(PydanticValidationError):
            PostCreate(**body)

    def test_author_requires_both_names(self):
        body = dict(VALID_BODY, author={"firstName": "Ada"})
        with pytest.raises(PydanticValidationError):
            PostCreate(**body)

    def test_author_must_be_composite(self):
        body = dict(VALID_BODY, author="Ada Lovelace")
        with pytest.raises(PydanticValidationError):
            PostCreate(**body)

    def test_client_id_is_dropped(self):
        payload = PostCreate(**VALID_BODY, id="chosen-by-client")
        assert "id" not in payload.to_document()

    def test_created_offset_converted_to_utc(self):
        payload = PostCreate(**VALID_BODY, created="2020-01-01T00:00:00+05:00")
        assert payload.created == datetime(2020, 1, 1, tzinfo=timezone(timedelta(hours=5)))
        assert payload.created.tzinfo == timezone.utc
        assert payload.created.hour == 19

    def test_created_without_offset_is_utc(self):
        payload = PostCreate(**VALID_BODY, created="2020-01-01T00:00:00")
        assert payload.created == datetime(2020, 1, 1, tzinfo=timezone.utc)


class TestPostUpdate:

    def test_empty_body_is_valid(self):
        assert PostUpdate().changes() == {}

    def test_changes_only_supplied_fields(self):
        payload = PostUpdate(id="abc", title="New Post", content="Blah blah")
        assert payload.changes() == {"title": "New Post", "content": "Blah blah"}

    def test_author_change_is_structured(self):
        payload = PostUpdate(author={"firstName": "Grace", "lastName": "Hopper"})
        assert payload.changes() == {"author": {"firstName": "Grace", "lastName": "Hopper"}}

    def test_null_field_rejected(self):
        with pytest.raises(PydanticValidationError, match="not null"):
            PostUpdate(title=None)

    def test_partial_author_rejected(self):
        with pytest.raises(PydanticValidationError):
            PostUpdate(author={"lastName": "Hopper"})


class TestPostView:

    def test_author_is_flattened(self, sample_post_document):
        view = PostView.from_document(sample_post_document)
        assert view.author == "Ada Lovelace"
        assert view.id == sample_post_document["id"]

    def test_stored_document_is_not_modified(self, sample_post_document):
        PostView.from_document(sample_post_document)
        assert sample_post_document["author"] == {"firstName": "Ada", "lastName": "Lovelace"}
