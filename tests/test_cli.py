from noise_api import cli

from tests.helpers import SCORES, FakeInferenceService


def test_analyze_rejects_non_mp3(tmp_path, capsys):
    wav = tmp_path / "clip.wav"
    wav.write_bytes(b"RIFF0000WAVE")

    code = cli.main(["analyze", str(wav), "--location", "Park"])

    assert code == 2
    assert "Please upload an MP3 file" in capsys.readouterr().err


def test_analyze_missing_file(tmp_path, capsys):
    code = cli.main(["analyze", str(tmp_path / "missing.mp3"), "--location", "Park"])

    assert code == 2
    assert "File not found" in capsys.readouterr().err


def test_analyze_requires_location(tmp_path, monkeypatch, capsys):
    mp3 = tmp_path / "street.mp3"
    mp3.write_bytes(b"ID3\x03")
    monkeypatch.setattr(cli, "InferenceService", lambda: FakeInferenceService(results=SCORES))

    code = cli.main(["analyze", str(mp3), "--no-upload"])

    assert code == 1
    assert "Please enter a location" in capsys.readouterr().err


def test_analyze_prints_history_entry(tmp_path, monkeypatch, capsys):
    mp3 = tmp_path / "street.mp3"
    mp3.write_bytes(b"ID3\x03")
    monkeypatch.setattr(cli, "InferenceService", lambda: FakeInferenceService(results=SCORES))

    code = cli.main(["analyze", str(mp3), "--location", "Downtown Park", "--no-upload", "--no-color"])

    out = capsys.readouterr().out
    assert code == 0
    assert "street.mp3  very high (70.0%)" in out
    assert "Location:  Downtown Park" in out
    assert "File Size: 4 Bytes" in out
    assert "Very high" in out
