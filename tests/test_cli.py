import pytest
from PIL import Image

from cartoonize import __version__, cli
from cartoonize.errors import InternalError


@pytest.fixture
def input_file(tmp_path, four_color_image):
    path = tmp_path / "in.png"
    four_color_image.save(path)
    return path


def test_end_to_end(tmp_path, input_file):
    out = tmp_path / "out.png"

    status = cli.main(["-i", str(input_file), "-o", str(out), "-c", "4", "-r", "1", "-t", "2"])

    assert status == 0
    with Image.open(out) as img:
        assert img.size == (4, 4)


def test_defaults_parse():
    args = cli.build_parser().parse_args(["-i", "a.png", "-o", "b.png"])
    config = cli.config_from_args(args)
    assert config.clusters == 10
    assert config.runs == 10
    assert config.seed == 0
    assert config.max_iterations == 10
    assert config.converge == 255.0
    assert config.max_threads == 1
    assert not args.verbose


def test_missing_input(tmp_path, caplog):
    out = tmp_path / "out.png"
    status = cli.main(["-i", str(tmp_path / "missing.png"), "-o", str(out)])
    assert status == 1
    assert "missing.png" in caplog.text
    assert not out.exists()


def test_bad_option_is_reported_before_loading(tmp_path, caplog):
    status = cli.main(["-i", str(tmp_path / "missing.png"), "-o", "x.png", "-t", "0"])
    assert status == 1
    assert "max-threads" in caplog.text
    assert "missing.png" not in caplog.text


def test_unwritable_output(tmp_path, input_file, caplog):
    status = cli.main(["-i", str(input_file), "-o", str(tmp_path / "out.unknownext"), "-c", "2"])
    assert status == 1
    assert "out.unknownext" in caplog.text


def test_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["-o", "out.png"])
    assert excinfo.value.code == 2


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--version"])
    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_internal_errors_propagate(tmp_path, input_file, monkeypatch):
    def broken(*args, **kwargs):
        raise InternalError("slot was never filled")

    monkeypatch.setattr(cli, "cartoonize_file", broken)
    with pytest.raises(InternalError):
        cli.main(["-i", str(input_file), "-o", str(tmp_path / "out.png")])


def test_oversized_input(tmp_path, caplog, monkeypatch):
    path = tmp_path / "big.png"
    Image.new("RGB", (100, 100)).save(path)
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)

    status = cli.main(["-i", str(path), "-o", str(tmp_path / "out.png")])

    assert status == 1
    assert "too large" in caplog.text
    assert not (tmp_path / "out.png").exists()
