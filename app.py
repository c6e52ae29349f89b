#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
QR Symbol Encoder - Flask Web Application

Front end over the qrsymbol core: encode a payload from a form, preview the
zone-colored symbol with its mask scores, and export PNG / SVG / console text.
"""

import logging
from io import BytesIO
from typing import Any, Mapping, Optional, Tuple

from flask import Flask, Response, current_app, render_template_string, request, send_file

from qrsymbol import (
    CapacityExceeded,
    EncodeError,
    InvalidArgument,
    evaluate_all_masks,
    make_qr,
    render_colored_png_from_matrix,
    render_colored_svg_from_matrix,
    render_png,
    render_text,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    'QR_DEFAULT_ECC': 'L',
    'QR_DEFAULT_BORDER': 4,
    'QR_MAX_BORDER': 20,
    'QR_PNG_SCALE': 10,
}

TEMPLATE = """
<!doctype html>
<html>
<head>
  <meta charset="utf-8">
  <title>QR Symbol Encoder</title>
  <style>
    body{font-family:Inter, Arial, sans-serif; padding:18px; background:#fff; color:#222}
    .row{display:flex; flex-wrap:wrap; gap:16px; align-items:flex-end}
    .field{display:flex; flex-direction:column; font-size:14px}
    input[type="text"], select, input[type="number"]{padding:6px 8px; font-family:monospace; border:1px solid #ccc; border-radius:6px}
    label{font-weight:600; margin-bottom:4px}
    button{padding:10px 16px; border-radius:8px; border:1px solid #333; background:#111; color:#fff; cursor:pointer}
    .card{margin-top:18px; border:1px solid #ddd; border-radius:10px; padding:14px}
    img{display:block; margin:8px 0; border:1px solid #ccc}
    .metrics{font-size:13px; color:#333; line-height:1.4}
    .error{color:#b00; font-weight:700}
  </style>
</head>
<body>
  <h1>QR Symbol Encoder</h1>

  <form method="post">
    <div class="row">
      <div class="field" style="flex:1 1 100%">
        <label>Payload</label>
        <input type="text" name="text" value="{{text|e}}" placeholder="UUID, MAC address, inventory JSON...">
      </div>
    </div>
    <div class="row">
      <div class="field">
        <label>ECC</label>
        <select name="ecc">
          {% for v in ['L','M','Q','H'] %}
            <option value="{{v}}" {% if ecc==v %}selected{% endif %}>{{v}}</option>
          {% endfor %}
        </select>
      </div>
      <div class="field">
        <label>Version</label>
        <select name="version">
          <option value="auto" {% if version=='auto' %}selected{% endif %}>auto (minimum)</option>
          {% for v in range(1,41) %}
            <option value="{{v}}" {% if version==v|string %}selected{% endif %}>v{{v}}</option>
          {% endfor %}
        </select>
      </div>
      <div class="field">
        <label>Mask</label>
        <select name="mask">
          <option value="auto" {% if mask=='auto' %}selected{% endif %}>auto</option>
          {% for m in range(8) %}
            <option value="{{m}}" {% if mask==m|string %}selected{% endif %}>{{m}}</option>
          {% endfor %}
        </select>
      </div>
      <div class="field">
        <label>Quiet zone</label>
        <input type="number" name="border" value="{{border}}" min="0" max="{{max_border}}">
      </div>
      <button type="submit">Generate</button>
    </div>
  </form>

  {% if error %}<p class="error">{{error}}</p>{% endif %}

  {% if qr %}
  <div class="card">
    <img src="data:image/png;base64,{{qr.img_b64}}" alt="QR code">
    <div class="metrics">
      Version {{qr.version}} ({{qr.size}}x{{qr.size}}), ECC {{qr.ecc}}, mask {{qr.mask}} (penalty {{qr.penalty}})<br>
      Modules: {{qr.modules}}, dark: {{qr.dark_modules}}, functional: {{qr.functional_modules}}, data+ECC: {{qr.data_modules}}<br>
      Best mask: {{qr.best_mask}} (score {{qr.best_score}}); scores: {{qr.mask_scores_text}}
    </div>
  </div>
  {% endif %}
</body>
</html>
"""


def _read_params(req) -> Tuple[str, str, str, str, int]:
    """Extract and validate QR generation parameters from a Flask request."""
    config = current_app.config
    text = (req.values.get('text') or "").strip()
    ecc = (req.values.get('ecc') or config['QR_DEFAULT_ECC']).strip().upper()
    version = (req.values.get('version') or "auto").strip()
    mask = (req.values.get('mask') or "auto").strip()

    default_border = int(config['QR_DEFAULT_BORDER'])
    try:
        border = int(req.values.get('border') or default_border)
        if border < 0 or border > int(config['QR_MAX_BORDER']):
            border = default_border
    except (ValueError, TypeError):
        border = default_border

    return text, ecc, version, mask, border


def _error_response(ex: EncodeError) -> Tuple[str, int]:
    if isinstance(ex, CapacityExceeded):
        return "payload too large for encoding", 413
    if isinstance(ex, InvalidArgument):
        return f"invalid parameters: {ex}", 400
    logger.error(f"Internal encoder fault: {ex}")
    return "internal encoder error", 500


def index():
    text, ecc, version, mask, border = _read_params(request)
    qr_view = None
    error = None
    status = 200

    if request.method == 'POST':
        if not text:
            error = "Enter the payload to encode."
        else:
            try:
                logger.info(f"Generating QR code with parameters: ecc={ecc}, version={version}, mask={mask}")
                symbol = make_qr(text, ecc=ecc, version=version, mask=mask)
                b64, metrics = render_colored_png_from_matrix(symbol, border=border, scale=6)
                best_mask, best_score, scores = evaluate_all_masks(
                    text.encode('utf-8'), ecc=symbol.ecc, version=symbol.version
                )
                logger.info(f"Generated version {symbol.version}, mask {symbol.mask}; best mask {best_mask}")
                qr_view = {
                    'version': symbol.version,
                    'size': metrics['size'],
                    'img_b64': b64,
                    'ecc': symbol.ecc,
                    'mask': symbol.mask,
                    'penalty': symbol.penalty,
                    'modules': metrics['modules'],
                    'dark_modules': metrics['dark_modules'],
                    'functional_modules': metrics['functional_modules'],
                    'data_modules': metrics['data_modules'],
                    'best_mask': best_mask,
                    'best_score': best_score,
                    'mask_scores_text': ", ".join(f"{k}:{v}" for k, v in sorted(scores.items())),
                }
            except EncodeError as ex:
                logger.warning(f"QR generation failed: {ex}")
                error, status = _error_response(ex)

    page = render_template_string(
        TEMPLATE,
        text=text, ecc=ecc, version=version, mask=mask, border=border,
        max_border=current_app.config['QR_MAX_BORDER'], qr=qr_view, error=error
    )
    return page, status


def _symbol_from_request():
    text, ecc, version, mask, border = _read_params(request)
    if not text:
        return None, border, ("Missing text", 400)
    try:
        return make_qr(text, ecc=ecc, version=version, mask=mask), border, None
    except EncodeError as ex:
        logger.warning(f"QR export failed: {ex}")
        return None, border, _error_response(ex)


def export_png():
    symbol, border, failure = _symbol_from_request()
    if failure:
        return failure
    png = render_png(symbol, border=border, scale=int(current_app.config['QR_PNG_SCALE']))
    return send_file(BytesIO(png), as_attachment=True, download_name='qr.png', mimetype='image/png')


def export_svg():
    symbol, border, failure = _symbol_from_request()
    if failure:
        return failure
    svg_bytes = render_colored_svg_from_matrix(symbol, border=border, scale=10)
    return send_file(BytesIO(svg_bytes), as_attachment=True,
                     download_name='qr_colored_zones.svg',
                     mimetype='image/svg+xml')


def export_txt():
    symbol, border, failure = _symbol_from_request()
    if failure:
        return failure
    return Response(render_text(symbol, border=border) + "\n", mimetype='text/plain; charset=utf-8')


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    """
    Build the Flask application.

    Configuration: DEFAULT_CONFIG, then QRSYMBOL_* environment variables,
    then the `config` mapping.
    """
    app = Flask(__name__)
    app.config.update(DEFAULT_CONFIG)
    app.config.from_prefixed_env('QRSYMBOL')
    if config:
        app.config.update(config)

    app.add_url_rule('/', 'index', index, methods=['GET', 'POST'])
    app.add_url_rule('/export/png', 'export_png', export_png, methods=['GET'])
    app.add_url_rule('/export/svg', 'export_svg', export_svg, methods=['GET'])
    app.add_url_rule('/export/txt', 'export_txt', export_txt, methods=['GET'])
    return app


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    create_app().run(debug=True)
