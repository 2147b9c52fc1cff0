import json

import pytest

from vttscan import (
    Cue,
    ReaderConfig,
    ScannerConfig,
    StringReader,
    Time,
    VTTFormatError,
    VTTParser,
    VTTSourceError,
    VTTTimestampCorrector,
    add_seconds_to_timestamp,
    apply_offset_to_cues,
    cue_to_dict,
    format_transcript_with_timestamps,
    iter_cues,
    parse_vtt,
    parse_vtt_content,
    read_cues,
    seconds_to_timestamp,
    timestamp_to_seconds,
)

SAMPLE = (
    "WEBVTT - sample\n"
    "\n"
    "1\n"
    "00:00:01.000 --> 00:00:02.500 align:start\n"
    "Hello\n"
    "world\n"
    "\n"
    "00:01:05.000 --> 00:01:07.000\n"
    "Second cue\n"
)


def test_iter_cues_yields_fresh_objects():
    cues = list(iter_cues(StringReader(SAMPLE)))
    assert len(cues) == 2
    assert cues[0] is not cues[1]
    assert cues[0].identifier == "1"
    assert cues[1].start_time == Time(0, 1, 5, 0)


def test_read_cues_rejects_bad_header():
    with pytest.raises(VTTFormatError):
        read_cues(StringReader("SRT\n\n"))


def test_cue_to_dict():
    cue = read_cues(StringReader(SAMPLE))[0]
    assert cue_to_dict(cue) == {
        'identifier': "1",
        'start_time': "00:00:01.000",
        'end_time': "00:00:02.500",
        'settings': [{'name': "align", 'value': "start"}],
        'text': "Hello\nworld",
        'payload': ["Hello", "world"],
    }


def test_parse_vtt_content():
    data = parse_vtt_content(SAMPLE)
    assert data['header'] == {'format': 'WEBVTT', 'description': "- sample", 'cues_count': 2}
    assert [c['text'] for c in data['cues']] == ["Hello\nworld", "Second cue"]

    assert parse_vtt_content(SAMPLE.encode("utf-8")) == data


def test_parse_vtt_content_empty_document():
    data = parse_vtt_content("WEBVTT\n")
    assert data['cues'] == []


def test_format_transcript_with_timestamps():
    data = parse_vtt_content(SAMPLE)
    assert format_transcript_with_timestamps(data['cues']) == (
        "[00:00:01] Hello world\n"
        "[00:01:05] Second cue"
    )


def test_parse_vtt(tmp_path):
    path = tmp_path / "sample.vtt"
    path.write_text(SAMPLE, encoding="utf-8")

    transcript, data = parse_vtt(str(path))
    assert transcript.startswith("[00:00:01] Hello world")
    assert data['header']['cues_count'] == 2


def test_parse_vtt_missing_file(tmp_path):
    with pytest.raises(VTTSourceError):
        parse_vtt(str(tmp_path / "nope.vtt"))


def test_parser_parse_to_segments(tmp_path):
    path = tmp_path / "sample.vtt"
    path.write_text(SAMPLE, encoding="utf-8")
    output = tmp_path / "out" / "segments.json"

    result = VTTParser().parse_to_segments(str(path), str(output), offset_ms=1000)
    assert result == {"segments_path": str(output), "cues_count": 2}

    with open(output, encoding="utf-8") as f:
        segments = json.load(f)
    assert segments['header']['correction'] == {'applied': True, 'offset_ms': 1000}
    assert segments['cues'][0]['start_time'] == "00:00:02.000"
    assert segments['cues'][0]['end_time'] == "00:00:03.500"


def test_parser_parse_content_to_dict():
    data = VTTParser().parse_content_to_dict(SAMPLE)
    assert data['header']['cues_count'] == 2


def test_timestamp_to_seconds():
    assert timestamp_to_seconds("00:01:30.500") == 90.5
    assert timestamp_to_seconds("01:30.5") == 90.5
    assert timestamp_to_seconds("90.5") == 90.5
    with pytest.raises(VTTFormatError):
        timestamp_to_seconds("00:01:30.500 extra")
    with pytest.raises(VTTFormatError):
        timestamp_to_seconds("1:60")


def test_seconds_to_timestamp():
    assert seconds_to_timestamp(90.5) == "00:01:30.500"
    assert seconds_to_timestamp(3725.25) == "01:02:05.250"
    assert seconds_to_timestamp(-3) == "00:00:00.000"


def test_add_seconds_to_timestamp():
    assert add_seconds_to_timestamp("00:05:30.000", 120) == "00:07:30.000"
    assert add_seconds_to_timestamp("00:00:01.000", -5) == "00:00:00.000"


def test_apply_offset_to_cues_copies():
    cues = read_cues(StringReader(SAMPLE))
    shifted = apply_offset_to_cues(cues, -1500)

    assert shifted[0].start_time == Time()
    assert shifted[0].stop_time == Time(0, 0, 1, 0)
    assert shifted[1].start_time == Time(0, 1, 3, 500)
    assert cues[0].start_time == Time(0, 0, 1, 0)
    assert shifted[0].payload == cues[0].payload
    assert shifted[0].payload is not cues[0].payload


def test_corrector_without_offset():
    corrector = VTTTimestampCorrector()
    cues = [Cue(payload=["x"])]
    assert corrector.apply_to_cues(cues) == cues
    assert corrector.get_correction_metadata() == {'applied': False, 'offset_ms': 0}


def test_scanner_config_latin1_and_replace():
    content = b"WEBVTT\n\n00:01.000 --> 00:02.000\nGr\xfc\xdfe\n"
    data = parse_vtt_content(content, ScannerConfig(encoding="latin-1"))
    assert data['cues'][0]['payload'] == ["Gr\u00fc\u00dfe"]

    data = parse_vtt_content(content, ScannerConfig(errors="replace"))
    assert data['cues'][0]['payload'] == ["Gr\ufffd\ufffde"]

    with pytest.raises(VTTFormatError):
        parse_vtt_content(content)


class _StubResponse:
    headers = {"Content-Type": "text/vtt"}

    def __init__(self, body):
        self.body = body
        self.closed = False

    def raise_for_status(self):
        pass

    def iter_content(self, chunk_size=1):
        for i in range(0, len(self.body), chunk_size):
            yield self.body[i:i + chunk_size]

    def close(self):
        self.closed = True


class _StubSession:
    def __init__(self, response):
        self.response = response
        self.urls = []

    def get(self, url, **kwargs):
        self.urls.append(url)
        return self.response


def test_parser_parse_url_to_dict():
    response = _StubResponse(SAMPLE.encode("utf-8"))
    session = _StubSession(response)
    parser = VTTParser(reader_config=ReaderConfig(chunk_size=7), session=session)

    data = parser.parse_url_to_dict("https://example.com/sample.vtt")

    assert session.urls == ["https://example.com/sample.vtt"]
    assert data['header'] == {'format': 'WEBVTT', 'description': "- sample", 'cues_count': 2}
    assert data['cues'][0]['identifier'] == "1"
    assert data['cues'][0]['settings'] == [{'name': "align", 'value': "start"}]
    assert data['cues'][1]['payload'] == ["Second cue"]
    assert response.closed
