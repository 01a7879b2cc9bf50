import json
from pathlib import Path

from fastapi import APIRouter

ENDPOINTS_FILE = Path(__file__).resolve().parent.parent / "endpoints.json"

router = APIRouter(prefix="/api", tags=["api"])

_endpoints: dict = json.loads(ENDPOINTS_FILE.read_text(encoding="utf-8"))

@router.get("")
async def describe_api():
    return _endpoints
