import json
import logging

from movie_booking.core.logging_config import CustomJsonFormatter, set_trace_id, trace_id_var


def format_record(formatter, **extra):
    record = logging.LogRecord("movie_booking.test", logging.INFO, __file__, 1, "Booking created", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return json.loads(formatter.format(record))


def test_extra_fields_are_emitted():
    formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s", service="movie-booking")

    payload = format_record(formatter, user_id=7, booking_id=1, method="POST")

    assert payload["message"] == "Booking created"
    assert payload["level"] == "INFO"
    assert payload["service"] == "movie-booking"
    assert payload["user_id"] == 7
    assert payload["booking_id"] == 1
    assert payload["method"] == "POST"
    assert "timestamp" in payload


def test_trace_id_from_context():
    formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")

    token = trace_id_var.set(None)
    try:
        assert "trace_id" not in format_record(formatter)

        set_trace_id("trace-abc")
        assert format_record(formatter)["trace_id"] == "trace-abc"
    finally:
        trace_id_var.reset(token)
