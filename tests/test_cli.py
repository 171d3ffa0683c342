import pytest
import logging

from meeus import cli, VERSION

@pytest.fixture(autouse=True)
def restore_jit():
    from meeus import _jit
    enabled = _jit.jit_enabled()
    yield
    _jit.enable_jit(enabled)

def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(['--version'])
    assert exc.value.code == 0
    assert VERSION in capsys.readouterr().out

def test_citation(capsys):
    assert cli.main(['--citation']) == 0
    assert 'Astronomical Algorithms' in capsys.readouterr().out

def test_no_command(capsys):
    assert cli.main([]) == 0
    assert 'usage' in capsys.readouterr().out

def test_kepler(capsys):
    # Example 30.a, p. 196
    assert cli.main(['kepler', '-e', '.1', '-M', '5']) == 0
    out = capsys.readouterr().out
    assert 'E = 5.554589' in out

def test_kepler_csv(capsys):
    assert cli.main(['--csv', 'kepler', '-e', '0', '-M', '90', '-a', '2']) == 0
    fields = [float(f) for f in capsys.readouterr().out.split(',')]
    assert fields[3:] == pytest.approx([90., 90., 2.])

def test_kepler_invalid(capsys):
    assert cli.main(['kepler', '-e', '1.5', '-M', '5']) == 1
    assert 'eccentricity' in capsys.readouterr().err

def test_jd(capsys):
    assert cli.main(['jd', '2000-01-01T12:00:00Z']) == 0
    out = capsys.readouterr().out
    assert 'JD = 2451545.000000' in out
    assert '2000-01-01T12:00:00.000Z' in out

def test_jd_keyword_override(capsys):
    assert cli.main(['--csv', 'jd'], time='1957-10-04T19:26:24Z') == 0
    assert capsys.readouterr().out.strip() == '1957-10-04T19:26:24.000Z, 2436116.310000'

def test_jd_invalid(capsys):
    assert cli.main(['jd', 'not a date']) == 1
    assert 'Could not parse' in capsys.readouterr().err

def test_deltat(capsys):
    assert cli.main(['deltat', '1977-02-18T03:37:40Z']) == 0
    out = capsys.readouterr().out
    assert 'Delta T = 47.' in out
    assert 'JDE = 2443192.65' in out

def test_equinox(capsys):
    assert cli.main(['equinox', '1962', '--approximate']) == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 4
    assert out[1].startswith('June solstice: 1962-06-21T21:')
    assert '(JDE 2437837.392' in out[1]

def test_equinox_csv(capsys):
    assert cli.main(['--csv', 'equinox', '2000']) == 0
    rows = [line.split(', ') for line in capsys.readouterr().out.splitlines()]
    assert [r[0] for r in rows] == ['March equinox', 'June solstice', 'September equinox', 'December solstice']
    assert rows[0][2].startswith('2000-03-20T07:')

def test_verbose(capsys, caplog):
    with caplog.at_level(logging.DEBUG, logger='meeus'):
        assert cli.main(['-vv', 'deltat', '2000-01-01']) == 0
    assert 'ΔT for year' in caplog.text
