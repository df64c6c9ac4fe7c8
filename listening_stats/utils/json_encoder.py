"""Custom JSON encoding utilities"""
import json
from datetime import datetime

from pydantic import BaseModel

class DateTimeEncoder(json.JSONEncoder):
    """Custom JSON encoder that handles datetime objects and report models"""
    def default(self, obj):
        if isinstance(obj, datetime):
            return obj.isoformat()
        if isinstance(obj, BaseModel):
            return obj.model_dump(by_alias=True)
        return super().default(obj)

def json_dumps(obj, indent=None):
    """Helper function to dump JSON with datetime handling"""
    return json.dumps(obj, cls=DateTimeEncoder, indent=indent)
