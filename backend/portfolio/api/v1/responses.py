from flask import jsonify
from portfolio.seo.metadata import not_found_metadata
from portfolio.seo.site import site_identity


def detail_response(item, meta_builder, structured_data_builder):
    site = site_identity()
    return jsonify({
        "item": item,
        "meta": meta_builder(site, item),
        "structured_data": structured_data_builder(site, item),
    })


def not_found_response(kind):
    """404 for a public page, with the metadata of its not-found page."""
    return jsonify({
        "error": "Not Found",
        "message": f"{kind} not found",
        "meta": not_found_metadata(site_identity(), kind),
    }), 404
