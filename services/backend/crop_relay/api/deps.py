from typing import Iterator

import requests
from fastapi import Depends

from crop_relay.config import Settings, get_settings
from crop_relay.services.prediction import CropPredictionService


# ---- HTTP session per request
def get_http_session() -> Iterator[requests.Session]:
    session = requests.Session()
    session.headers.update({"Accept": "application/json"})
    try:
        yield session
    finally:
        session.close()


# ---- Upstream forwarder
def get_prediction_service(
    session: requests.Session = Depends(get_http_session),
    settings: Settings = Depends(get_settings),
) -> CropPredictionService:
    return CropPredictionService(session, settings.prediction_api_url)
