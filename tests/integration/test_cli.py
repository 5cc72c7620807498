"""Integration tests for the freehand command line.

Runs freehand.cli.main end to end on JSON stroke files written to a
temporary directory and checks the output written to stdout.

Example:
    Run the command-line tests::

        $ pytest tests/integration/test_cli.py -v
"""

import io
import json
import logging

import pytest

from freehand import cli, config
from freehand.domain.options import ease_in, linear
from freehand.render.clipping import ClipUnavailableError, ShapelyUnion

# configure_logging is patched out for main(); keep the real one for its own tests
_configure_logging = config.configure_logging

STROKE = [[0, 0, 0.5], [10, 2, 0.6], [20, 5, 0.7], [30, 9, 0.4]]


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Keep main() from replacing the root handlers pytest installs."""
    monkeypatch.setattr(config, 'configure_logging', lambda *args, **kwargs: None)


@pytest.fixture
def stroke_file(tmp_path):
    path = tmp_path / 'stroke.json'
    path.write_text(json.dumps(STROKE))
    return path


def _run(capsys, *argv):
    status = cli.main([str(a) for a in argv])
    captured = capsys.readouterr()
    return status, captured.out, captured.err


class TestOutputFormats:

    def test_path_is_default(self, capsys, stroke_file):
        status, out, _ = _run(capsys, stroke_file)
        assert status == 0
        assert out.startswith('M ')
        assert out.strip().endswith('Z')

    def test_outline(self, capsys, tmp_path):
        path = tmp_path / 'dot.json'
        path.write_text('[[5, 5]]')
        status, out, _ = _run(capsys, path, '--format', 'outline')
        assert status == 0
        outline = json.loads(out)
        assert len(outline) == 22
        assert all(len(p) == 2 for p in outline)

    def test_info(self, capsys, stroke_file):
        status, out, _ = _run(capsys, stroke_file, '--format', 'info', '--size', 12)
        assert status == 0
        info = json.loads(out)
        assert info['point_count'] == 4
        assert info['options']['size'] == 12
        assert info['path'].startswith('M')

    def test_mark_object_with_device_type(self, capsys, tmp_path):
        path = tmp_path / 'mark.json'
        points = [{'x': x, 'y': 0, 'pressure': 0.2} for x in range(0, 40, 4)]
        path.write_text(json.dumps({'type': 'pen', 'points': points}))
        status, out, _ = _run(capsys, path, '--format', 'info')
        assert status == 0
        assert json.loads(out)['options']['simulate_pressure'] is False

    def test_device_type_flag_overrides_file(self, capsys, tmp_path):
        path = tmp_path / 'mark.json'
        path.write_text(json.dumps({'type': 'pen', 'points': STROKE}))
        status, out, _ = _run(capsys, path, '--format', 'info', '--device-type', 'mouse')
        assert status == 0
        assert json.loads(out)['options']['simulate_pressure'] is True

    def test_reads_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr('sys.stdin', io.StringIO(json.dumps(STROKE)))
        status, out, _ = _run(capsys, '-')
        assert status == 0
        assert out.startswith('M ')

    def test_precision(self, capsys, stroke_file):
        status, out, _ = _run(capsys, stroke_file, '--precision', 0)
        assert status == 0
        assert '.' not in out

    def test_clip(self, capsys, stroke_file):
        status, out, _ = _run(capsys, stroke_file, '--clip')
        assert status == 0
        assert out.startswith('M ')


class TestErrors:

    def test_missing_file(self, capsys, tmp_path):
        status, out, err = _run(capsys, tmp_path / 'missing.json')
        assert status == 1
        assert out == ''
        assert err.startswith('Error:')

    def test_invalid_json(self, capsys, tmp_path):
        path = tmp_path / 'broken.json'
        path.write_text('{not json')
        status, _, err = _run(capsys, path)
        assert status == 1
        assert 'Error:' in err

    def test_wrong_shape(self, capsys, tmp_path):
        path = tmp_path / 'shape.json'
        path.write_text('{"strokes": []}')
        status, _, err = _run(capsys, path)
        assert status == 1
        assert 'points' in err

    def test_bad_options_file(self, capsys, tmp_path, stroke_file):
        options = tmp_path / 'options.json'
        options.write_text('[]')
        status, _, err = _run(capsys, stroke_file, '--options', options)
        assert status == 1
        assert 'JSON object' in err

    def test_null_option_uses_default(self, capsys, tmp_path, stroke_file):
        options = tmp_path / 'options.json'
        options.write_text('{"size": null, "streamline": "fast"}')
        status, out, _ = _run(capsys, stroke_file, '--options', options)
        _, expected, _ = _run(capsys, stroke_file)
        assert status == 0
        assert out == expected

    def test_clip_failure(self, capsys, monkeypatch, stroke_file):
        def broken(self, rings):
            raise ClipUnavailableError("union backend offline")

        monkeypatch.setattr(ShapelyUnion, 'union', broken)
        status, out, err = _run(capsys, stroke_file, '--clip')
        assert status == 1
        assert out == ''
        assert 'offline' in err


class TestBuildOptions:

    def _options(self, *argv):
        args = cli.build_parser().parse_args(['stroke.json', *[str(a) for a in argv]])
        return cli.build_options(args)

    def test_defaults(self):
        options = self._options()
        assert options.size == config.DEFAULT_SIZE
        assert options.clip is False

    def test_app_preset(self):
        options = self._options('--preset', 'app')
        assert (options.size, options.thinning) == (16, 0.75)

    def test_flags_override_preset(self):
        options = self._options('--preset', 'app', '--size', 4, '--easing', 'easeIn')
        assert options.size == 4
        assert options.thinning == 0.75
        assert options.easing_function is ease_in

    def test_no_thinning(self):
        assert self._options('--thinning', 0.3, '--no-thinning').thinning is None

    def test_switches(self):
        options = self._options('--no-simulate-pressure', '--clip')
        assert options.simulate_pressure is False
        assert options.clip is True

    def test_options_file_over_preset(self, tmp_path):
        path = tmp_path / 'options.json'
        path.write_text(json.dumps({'smoothing': 0.1}))
        options = self._options('--preset', 'app', '--options', path, '--streamline', 0.9)
        assert options.size == 16
        assert options.smoothing == 0.1
        assert options.streamline == 0.9
        assert options.easing_function is linear


class TestConfigureLogging:
    """config.configure_logging sets up the root logger."""

    @pytest.fixture
    def root_logger(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield root
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_level_and_file(self, root_logger, tmp_path):
        log_file = tmp_path / 'freehand.log'
        _configure_logging('debug', str(log_file))

        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 2
        assert logging.getLogger('shapely').level == logging.WARNING

        logging.getLogger('freehand.test').debug("traced %d points", 3)
        for handler in root_logger.handlers:
            handler.flush()
        text = log_file.read_text()
        assert '[freehand.test] traced 3 points' in text
        assert 'DEBUG' in text

    def test_unknown_level_falls_back_to_info(self, root_logger):
        _configure_logging('chatty')
        assert root_logger.level == logging.INFO
        assert len(root_logger.handlers) == 1

    def test_reconfiguring_replaces_handlers(self, root_logger):
        _configure_logging('warning')
        _configure_logging('error')
        assert root_logger.level == logging.ERROR
        assert len(root_logger.handlers) == 1
        assert root_logger.handlers[0].formatter._fmt == config.LOG_FORMAT
