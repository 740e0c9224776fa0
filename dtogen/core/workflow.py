from enum import Enum

class ConversionStage(str, Enum):
    PARSE = "PARSE"
    RENDER_REQUEST = "RENDER_REQUEST"
    RENDER_RESPONSE = "RENDER_RESPONSE"
    DONE = "DONE"
    FAILED = "FAILED"
