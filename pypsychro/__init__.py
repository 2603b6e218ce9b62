"""
pypsychro
===================================

-----------------------------------------------------
Real-gas properties of dry air and moist air
-----------------------------------------------------

Implements the virial equation of state formulation of Hyland & Wexler (1983) for dry air
(173.15 K - 473.15 K) and saturated moist air (173.15 K - 372.15 K) at pressures to 5 MPa,
the basis of the ASHRAE psychrometric tables.

Note: Functions are grouped into modules, requiring seperate imports

Includes functions to calculate;

- Virial coefficients of air, water vapor and their mixtures, with temperature derivatives
- Compressibility factor, molar and specific volume of dry and moist air
- Enthalpy and entropy of dry and moist air
- The enhancement factor and mole fraction of water vapor in saturated moist air
- Saturation pressure of water over liquid and ice, and dew / frost point temperatures
- Tables of saturated moist air properties

"""

__version__ = '1.0.0'

import logging

# Package logger. Library code only attaches a NullHandler
logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

submodules = [
    'air',
    'classes',
    'constants',
    'efactor',
    'shared_fns',
    'validate',
    'virial',
    'water',
    'zfactor'
]

__all__ = submodules + ['debug_logger']

import importlib

def __dir__():
    return __all__


def __getattr__(name):
    if name in submodules:
        return importlib.import_module(f'pypsychro.{name}')
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(
                f"Module 'pypsychro' has no attribute '{name}'"
            )


def simple_formatter() -> logging.Formatter:
    fmt = "[%(asctime)s - %(name)-20s - %(levelname)-9s] - %(message)s"
    return logging.Formatter(fmt, datefmt="%H:%M:%S")


def debug_logger() -> logging.Logger:
    """ Sets up debug logging of solver iterations to the console, and returns the package logger """
    logger.setLevel(logging.DEBUG)
    logger.handlers = []
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(simple_formatter())
    logger.addHandler(console_handler)
    return logger
