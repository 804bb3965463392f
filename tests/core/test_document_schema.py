"""Document Schema - clean-then-validate contract over pydantic records.

Tests cover:
    - clean(): unknown keys dropped, strings trimmed, empty optionals removed/cleared
    - validate(): violations reported per field, never raised
    - modifier mode ignores missing required fields
    - ValidationContext lifecycle (validate / is_valid / reset)
"""

from vocabulary.core.document_schema import DocumentSchema, FieldViolation
from vocabulary.schemas.entity import NamedEntityDefinition
from vocabulary.schemas.profile import ProfileDefinition


entity_schema = DocumentSchema(NamedEntityDefinition)
profile_schema = DocumentSchema(ProfileDefinition)


# --- clean() ------------------------------------------------------------------

def test_clean_drops_unknown_keys():
    cleaned = entity_schema.clean({"name": "Databases", "color": "blue"})
    assert cleaned == {"name": "Databases"}


def test_clean_trims_strings():
    cleaned = entity_schema.clean({"name": "  Databases ", "description": " x "})
    assert cleaned == {"name": "Databases", "description": "x"}


def test_clean_removes_empty_optional_string_on_insert():
    cleaned = entity_schema.clean({"name": "Databases", "description": "   "})
    assert "description" not in cleaned


def test_clean_clears_empty_optional_string_on_update():
    cleaned = entity_schema.clean({"description": ""}, modifier=True)
    assert cleaned == {"description": None}


def test_clean_keeps_empty_required_string_for_validation():
    cleaned = entity_schema.clean({"name": ""})
    assert cleaned == {"name": ""}
    assert entity_schema.validate(cleaned)


def test_clean_wraps_scalar_into_list_field():
    cleaned = profile_schema.clean({"username": "amy", "interests": " Databases "})
    assert cleaned["interests"] == ["Databases"]


def test_clean_trims_list_items():
    cleaned = profile_schema.clean({"favorites": [" Hiking", "Surfing "]})
    assert cleaned["favorites"] == ["Hiking", "Surfing"]


def test_clean_empty_string_for_list_field_becomes_empty_list():
    assert profile_schema.clean({"interests": ""}) == {"interests": []}


# --- validate() ---------------------------------------------------------------

def test_valid_definition_has_no_violations():
    assert entity_schema.validate({"name": "Databases", "description": None}) == []


def test_missing_name_reported():
    violations = entity_schema.validate({"description": "x"})
    assert [v.field for v in violations] == ["name"]
    assert violations[0].type == "missing"


def test_wrong_type_reported():
    violations = entity_schema.validate({"name": 42})
    assert violations[0].field == "name"
    assert violations[0].type == "string_type"


def test_whitespace_name_rejected():
    violations = entity_schema.validate({"name": "   "})
    assert [v.field for v in violations] == ["name"]


def test_unknown_key_rejected():
    violations = entity_schema.validate({"name": "Databases", "slug": "db"})
    assert [v.field for v in violations] == ["slug"]


def test_list_item_violation_has_dotted_field():
    violations = profile_schema.validate({"username": "amy", "interests": ["ok", 3]})
    assert violations[0].field == "interests.1"


def test_modifier_mode_ignores_missing_required_fields():
    assert entity_schema.validate({"description": "new"}, modifier=True) == []


def test_modifier_mode_still_checks_present_fields():
    violations = profile_schema.validate({"interests": None}, modifier=True)
    assert [v.field for v in violations] == ["interests"]


def test_field_violation_to_dict():
    v = FieldViolation("name", "missing", "Field required")
    assert v.to_dict() == {"field": "name", "type": "missing", "message": "Field required"}


def test_field_names_follow_model():
    assert entity_schema.field_names == ["name", "description"]


# --- ValidationContext --------------------------------------------------------

def test_context_reports_last_validation():
    context = profile_schema.named_context("profile_update")
    assert context.name == "profile_update"
    assert context.validate({"interests": []}) is False
    assert not context.is_valid()
    assert [v.field for v in context.validation_errors()] == ["username"]


def test_context_reset_clears_errors():
    context = profile_schema.named_context("profile_update")
    context.validate({})
    context.reset()
    assert context.is_valid()
    assert context.validation_errors() == []


def test_named_context_returns_independent_contexts():
    first = profile_schema.named_context("a")
    second = profile_schema.named_context("a")
    first.validate({})
    assert second.is_valid()
