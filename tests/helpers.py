import json


def sent_payload(client, call_index=-1):
    """Decode the JSON body of a recorded post() call."""
    call = client.post.call_args_list[call_index]
    content = call.kwargs["content"]
    if isinstance(content, bytes):
        content = content.decode("utf-8")
    return json.loads(content)


def sent_context(client, call_index=-1):
    """Return the single text part sent to Gemini."""
    payload = sent_payload(client, call_index)
    return payload["contents"][0]["parts"][0]["text"]


def history_texts(service):
    """List history as (speaker value, text) pairs."""
    return [(turn.speaker.value, turn.text) for turn in service.history]
