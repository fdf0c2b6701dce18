import json

from multilateration.core.estimator import EstimationResult
from multilateration.core.marshal import result_to_dict


def parse_json_payload(payload_bytes: bytes):
    try:
        return json.loads(payload_bytes.decode('utf-8'))
    except (UnicodeDecodeError, ValueError):
        return None


def result_payload(result: EstimationResult) -> str:
    return json.dumps(result_to_dict(result))


def error_payload(code: str, message: str) -> str:
    return json.dumps({'error': {'code': code, 'message': message}})
