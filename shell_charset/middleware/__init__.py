"""App middleware: request logging, unified JSON envelope and error handlers."""

from __future__ import annotations

import time
import logging
from functools import wraps
from flask import Flask, request, jsonify, g

from shell_charset.services.charset.errors import DecodeMismatch, NoMatch

logger = logging.getLogger(__name__)


def _error(code: str, message: str, details: str, status: int):
    return jsonify({'success': False, 'error': {'code': code, 'message': message, 'details': details}}), status


def setup_middleware(app: Flask):
    @app.before_request
    def before_request():
        g.start_time = time.time()
        logger.info(f"Request: {request.method} {request.path}")
        g.request_id = f"{int(time.time())}-{id(request)}"

    @app.after_request
    def after_request(response):
        if hasattr(g, 'start_time'):
            duration = time.time() - g.start_time
            response.headers['X-Response-Time'] = f"{duration:.3f}s"
        response.headers['X-Request-ID'] = getattr(g, 'request_id', 'unknown')
        response.headers['X-API-Version'] = 'v1'
        return response


def api_response(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            result = func(*args, **kwargs)
            if isinstance(result, tuple):
                data, status_code = result
                return jsonify({'success': True, 'data': data}), status_code
            return jsonify({'success': True, 'data': result})
        except NoMatch as e:
            return _error('NO_MATCH', '未找到可识别的编码标签', str(e), 400)
        except DecodeMismatch as e:
            return _error('DECODE_MISMATCH', '内容与声明的编码不一致', str(e), 422)
        except ValueError as e:
            msg = str(e)
            return _error('INVALID_ARGUMENT', msg, msg, 400)
        except Exception as e:  # pragma: no cover
            logger.error(f"Unexpected error in {func.__name__}: {e}", exc_info=True)
            return _error('INTERNAL', '服务器内部错误，请稍后重试', str(e), 500)
    return wrapper


def register_error_handlers(app: Flask):
    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'success': False, 'error': {'code': 'NOT_FOUND', 'message': '接口不存在'}}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({'success': False, 'error': {'code': 'METHOD_NOT_ALLOWED', 'message': '请求方法不允许'}}), 405

    @app.errorhandler(413)
    def payload_too_large(error):
        return jsonify({'success': False, 'error': {'code': 'PAYLOAD_TOO_LARGE', 'message': '请求体过大'}}), 413

    @app.errorhandler(500)
    def internal_error(error):
        return jsonify({'success': False, 'error': {'code': 'INTERNAL', 'message': '服务器内部错误'}}), 500


__all__ = ['setup_middleware', 'api_response', 'register_error_handlers']
