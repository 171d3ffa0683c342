# The MIT License (MIT)
# 
# Copyright (c) 2026 The meeus developers
# 
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Command-line front end: ``meeus`` or ``python -m meeus``."""

import sys, argparse, logging
import numpy as np

from . import VERSION, enable_jit
from . import deltat, julian, kepler, solstice
from .errors import MeeusError

logger = logging.getLogger(__name__)

_arg_parser = argparse.ArgumentParser(prog='meeus',description='Astronomical algorithms after Jean Meeus')
_arg_parser.add_argument('--version',action='version',version=f'%(prog)s {VERSION}')
_arg_parser.add_argument('--citation',action='store_true',help='Print citation information')
_arg_parser.add_argument('--jit',action='store_true',help='Enable Numba acceleration (likely to cause slowdown for a single computation!)')
_arg_parser.add_argument('-v','--verbose',action='count',default=0,help='Log solver decisions (-vv for debug output)')
_arg_parser.add_argument('--csv',action='store_true',help='Comma separated values')
_commands = _arg_parser.add_subparsers(dest='command',metavar='command')

_kepler = _commands.add_parser('kepler',help='Solve Kepler\'s equation')
_kepler.add_argument('-e','--eccentricity',type=float,required=True,help='orbital eccentricity, 0 <= e < 1')
_kepler.add_argument('-M','--mean_anomaly',type=float,required=True,help='mean anomaly, in decimal degrees')
_kepler.add_argument('-a','--axis',type=float,default=1.0,help='semimajor axis, in AU')
_kepler.add_argument('--places',type=int,default=15,help='decimal places of the iterative solution')

_jd = _commands.add_parser('jd',help='Julian day of a date and time')
_jd.add_argument('time',nargs='?',default='now',help='"now" or date and time in ISO8601 format or a (UTC) POSIX timestamp')

_deltat = _commands.add_parser('deltat',help='Difference between dynamical time and universal time')
_deltat.add_argument('time',nargs='?',default='now',help='"now" or date and time in ISO8601 format or a (UTC) POSIX timestamp')

_equinox = _commands.add_parser('equinox',help='Equinoxes and solstices of a year')
_equinox.add_argument('year',type=int,help='year, astronomical numbering')
_equinox.add_argument('--approximate',action='store_true',help='Use the periodic terms of table 27.C instead of iterating on the solar longitude')

_SEASONS = (
    ('March equinox', solstice.march, solstice.march2),
    ('June solstice', solstice.june, solstice.june2),
    ('September equinox', solstice.september, solstice.september2),
    ('December solstice', solstice.december, solstice.december2),
)

def main(args=None, **kwargs):
    """Run meeus command-line tool.

    If run without arguments, uses sys.argv, otherwise arguments may be
    specified by a list of strings to be parsed, e.g.:
        main(['jd','2000-01-01T12:00:00'])
    or as keyword arguments, overriding parsed values:
        main(['jd'], time='now')
    or as an argparse.Namespace object (as produced by argparse.ArgumentParser)

    Parameters
    ----------
    args : list of str or argparse.Namespace, optional
        Command-line arguments. sys.argv is used if not provided.
    citation : bool
        If true, print citation information and quit
    jit : bool
        If true, enable Numba acceleration
    verbose : int
        Logging verbosity, 1 for INFO and 2 for DEBUG
    csv : bool
        If True, output as comma separated values
    command : str
        one of kepler, jd, deltat, equinox

    Returns
    -------
    status : int
        0 on success, 1 when the computation fails
    """
    if args is None and not kwargs:
        args = _arg_parser.parse_args()
    elif args is None or isinstance(args,(list,tuple)):
        args = _arg_parser.parse_args(args or [])

    for kw in kwargs:
        setattr(args,kw,kwargs[kw])

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG if args.verbose > 1 else logging.INFO,
                            format='%(levelname)s %(name)s: %(message)s')

    if args.citation:
        print("Algorithms:")
        print("  Jean Meeus, \"Astronomical Algorithms\", 2nd edition,")
        print("  Willmann-Bell, Richmond, 1998, ISBN 0-943396-61-1")
        return 0

    if args.command is None:
        _arg_parser.print_usage()
        return 0

    enable_jit(args.jit)

    try:
        return _COMMANDS[args.command](args)
    except (MeeusError, ValueError) as err:
        logger.debug('%s failed', args.command, exc_info=True)
        print(f'{_arg_parser.prog} {args.command}: {err}', file=sys.stderr)
        return 1

def _run_kepler(args):
    e, a = args.eccentricity, args.axis
    M = np.deg2rad(args.mean_anomaly)
    E = kepler.eccentric_anomaly(e, M, places=args.places)
    nu = kepler.true_anomaly(E, e)
    r = kepler.radius(E, e, a)
    E, nu = np.rad2deg(E), np.rad2deg(nu)
    if args.csv:
        print(f'{e}, {args.mean_anomaly}, {a}, {E:0.9f}, {nu:0.9f}, {r:0.9f}')
    else:
        print(f"Solving Kepler's equation for e = {e}, M = {args.mean_anomaly} deg")
        print(f"E = {E:0.9f} deg")
        print(f"nu = {nu:0.9f} deg")
        print(f"r = {r:0.9f} AU")
    return 0

def _run_jd(args):
    jd = julian.time_to_jd(args.time)
    if args.csv:
        print(f'{julian.jd_to_iso8601(jd)}, {jd:0.6f}')
    else:
        print(f"T = {julian.jd_to_iso8601(jd)}")
        print(f"JD = {jd:0.6f}")
    return 0

def _run_deltat(args):
    jd = julian.time_to_jd(args.time)
    dt = deltat.delta_t(jd)
    if args.csv:
        print(f'{julian.jd_to_iso8601(jd)}, {dt:0.1f}')
    else:
        print(f"T = {julian.jd_to_iso8601(jd)}")
        print(f"Delta T = {dt:0.1f} s")
        print(f"JDE = {jd.to_jde(dt):0.6f}")
    return 0

def _run_equinox(args):
    for name, approximate, iterate in _SEASONS:
        jde = approximate(args.year) if args.approximate else iterate(args.year)
        # jd_to_iso8601 labels UTC, but these instants are dynamical time
        ts = julian.jd_to_iso8601(jde)[:-1] + ' TD'
        if args.csv:
            print(f'{name}, {jde:0.5f}, {ts}')
        else:
            print(f"{name}: {ts} (JDE {jde:0.5f})")
    return 0

_COMMANDS = {
    'kepler': _run_kepler,
    'jd': _run_jd,
    'deltat': _run_deltat,
    'equinox': _run_equinox,
}
