# portfolio/api/v1/editor.py
from flask import jsonify
from flask_jwt_extended import jwt_required
from portfolio.domain.invariants.content import assert_field_types
from portfolio.richtext.editor import RichTextEditor, ViewMode
from portfolio.richtext.toolbar import build_block
from portfolio.utils.decorators import roles_required
from portfolio.utils.request_data import json_body
from . import v1_bp

EDITOR_FIELD_TYPES = {"html": str}


def _editor_state(editor):
    return {
        "html": editor.html,
        "word_count": editor.word_count,
        "read_time": editor.read_time,
    }


@v1_bp.route("/admin/editor/preview", methods=["POST"])
@jwt_required()
@roles_required("admin")
def preview_content():
    data = json_body()
    assert_field_types(data, EDITOR_FIELD_TYPES)

    editor = RichTextEditor(data.get("html") or "", ViewMode.PREVIEW)
    return jsonify(_editor_state(editor))


@v1_bp.route("/admin/editor/insert", methods=["POST"])
@jwt_required()
@roles_required("admin")
def insert_block():
    data = json_body()
    assert_field_types(data, EDITOR_FIELD_TYPES)

    block = data.get("block")
    if not isinstance(block, dict):
        return jsonify({"error": "'block' must be an object"}), 400

    editor = RichTextEditor(data.get("html") or "")
    editor.insert(build_block(block))
    return jsonify(_editor_state(editor))
