# MQTT topic layout: mlat/<client_id>/request -> mlat/<client_id>/result
REQUEST_TOPIC = "mlat/+/request"


def result_topic(client_id: str) -> str:
    return f"mlat/{client_id}/result"


def client_id_from_topic(topic: str):
    parts = topic.split('/')
    if len(parts) == 3 and parts[0] == 'mlat' and parts[2] == 'request':
        return parts[1]
    return None
