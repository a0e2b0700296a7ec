"""Schémas de champs : inférence de type, normalisation, construction."""
from .inference import INFERENCE_RULES, infer_type, matching_rule
from .spec import field_spec_from_config
from .builder import (
    FieldSchema, FieldGroupSchema, PartSchema, FieldSchemaBuilder,
    build_field_definition, build_for_page_part, humanize_field_name,
)
