import json


def make_gemini_body(text: str, finish_reason: str = "STOP") -> str:
    """Build a generateContent response body the way the API formats it."""
    return json.dumps({
        "candidates": [
            {
                "content": {
                    "parts": [{"text": text}],
                    "role": "model"
                },
                "finishReason": finish_reason,
                "index": 0
            }
        ],
        "usageMetadata": {
            "promptTokenCount": 4210,
            "candidatesTokenCount": 38,
            "totalTokenCount": 4248
        },
        "modelVersion": "gemini-2.5-flash-lite"
    }, indent=2)


CIVIL_REGISTRY_REPLY = (
    "Room 108, Ground Floor. The City Civil Registry Office (CCRO) is headed by "
    "Officer-In-Charge Arsenio M. Riparip, contact (02) 5308-9925.\n\n"
    "Is there anything else I can help you with?"
)

GEMINI_OK_BODY = make_gemini_body(CIVIL_REGISTRY_REPLY)

GEMINI_BLOCKED_BODY = json.dumps({
    "promptFeedback": {
        "blockReason": "SAFETY",
        "safetyRatings": [
            {"category": "HARM_CATEGORY_HARASSMENT", "probability": "MEDIUM"}
        ]
    },
    "modelVersion": "gemini-2.5-flash-lite"
}, indent=2)

GEMINI_TRUNCATED_BODY = '{"candidates": [{"content": {"parts": [{"text": "Room 108, Ground Fl'

GEMINI_INVALID_KEY_BODY = json.dumps({
    "error": {
        "code": 400,
        "message": "API key not valid. Please pass a valid API key.",
        "status": "INVALID_ARGUMENT"
    }
}, indent=2)
