from flask import jsonify
from portfolio_builder.domain.sections.registry import DEFAULT_REGISTRY, HOME_SECTION_ID
from . import v1_bp


@v1_bp.route("/sections/manifest", methods=["GET"])
def section_manifest():
    """Section catalog the editor builds its forms from."""
    return jsonify({
        "home_section": HOME_SECTION_ID,
        "sections": [
            {
                "id": definition.id,
                "default_name": definition.default_name,
                "default_order": definition.default_order,
                "default_enabled": definition.default_enabled,
                "default_view_options": dict(definition.default_view_options),
                "fields": {name: kind.value for name, kind in definition.fields.items()},
            }
            for definition in DEFAULT_REGISTRY
        ],
    })
