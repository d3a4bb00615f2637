"""Charset routes: label parsing and labeled decoding."""

from __future__ import annotations

import logging
from flask import Blueprint, current_app, request

from shell_charset.middleware import api_response
from shell_charset.services import Charset, parse_charset
from shell_charset.services.charset import labels

charset_bp = Blueprint('charset', __name__)

# 查询参数中表示平台默认编码的名称，不是编码标签
DEFAULT_CHARSET_NAME = 'Default'
logger = logging.getLogger(__name__)


def _charset_from_args() -> Charset:
	name = (request.args.get('charset') or '').strip()
	if not name:
		raise ValueError('缺少 charset 参数')
	if name == DEFAULT_CHARSET_NAME:
		return Charset.DEFAULT
	return Charset.from_label(name)


@charset_bp.route('/charset/labels', methods=['GET'])
@api_response
def list_labels():
	return labels()


@charset_bp.route('/charset/parse', methods=['POST'])
@api_response
def parse_label():
	payload = request.get_json(silent=True) or {}
	text = payload.get('text')
	if not isinstance(text, str):
		raise ValueError('text 字段必须为字符串')
	remainder, charset = parse_charset(text)
	return {'charset': charset.name, 'label': charset.label, 'remainder': remainder}


@charset_bp.route('/charset/decode', methods=['POST'])
@api_response
def decode_body():
	charset = _charset_from_args()
	data = request.get_data(cache=False)
	text = charset.decode(data)
	logger.debug(f"decode {charset.name}: {len(data)} bytes -> {len(text)} chars")
	return {'charset': charset.name, 'text': text}


@charset_bp.route('/charset/detect', methods=['POST'])
@api_response
def detect_and_decode():
	result = current_app.extensions['charset_service'].decode(request.get_data(cache=False))
	return result.to_dict()
