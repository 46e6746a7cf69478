"""
api.routes_convert - /api/v1/convert endpoint.

Returns the unit / entity / part records for a package and a CubeMX pin
table without writing anything; the caller decides where they go.
"""

from flask import request, jsonify

import config
from api import api_bp
from import_engine import convert


@api_bp.route("/convert", methods=["POST"])
def api_convert():
    """
    POST /api/v1/convert

    JSON body:
        package      - decoded package record {uuid, pads: {…}}
        pin_table    - CubeMX XML as a string, or a list of
                       {Type, Name, Position, Signal?} entries
        name         - part name (also MPN and file name)
        datasheet    - optional URL
        description  - optional text
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "expected a JSON object body"}), 400

    package = data.get("package")
    pin_table = data.get("pin_table")
    name = str(data.get("name") or "").strip()

    missing = [k for k, v in (("package", package), ("pin_table", pin_table),
                              ("name", name)) if not v]
    if missing:
        return jsonify({"error": f"missing field(s): {', '.join(missing)}"}), 400

    result = convert(
        package, pin_table,
        name=name,
        datasheet=str(data.get("datasheet") or ""),
        description=str(data.get("description") or ""),
        manufacturer=config.MANUFACTURER,
        prefix=config.PREFIX,
        tags=config.TAGS,
    )

    body = result.records()
    body["report"] = result.report.to_dict()
    return jsonify(body)
