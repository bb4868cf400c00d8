import json
import logging

from userhub.obs import logging as obs_logging


def _record(**extra) -> logging.LogRecord:
	record = logging.LogRecord("userhub.test", logging.INFO, __file__, 1, "users.saved", None, None)
	for key, value in extra.items():
		setattr(record, key, value)
	return record


def test_formatter_emits_json_with_bound_request_id():
	tokens = obs_logging.bind_context(request_id="req-1", route="/users/save")
	try:
		line = obs_logging.JSONLogFormatter().format(_record(user_id=3))
	finally:
		obs_logging.reset_context(tokens)

	payload = json.loads(line)
	assert payload["msg"] == "users.saved"
	assert payload["request_id"] == "req-1"
	assert payload["route"] == "/users/save"
	assert payload["user_id"] == 3


def test_formatter_redacts_sensitive_fields():
	line = obs_logging.JSONLogFormatter().format(_record(password="hunter2", detail="x" * 300))

	payload = json.loads(line)
	assert payload["password"] == "[redacted]"
	assert payload["detail"].endswith("…")
	assert obs_logging.current_request_id() is None
