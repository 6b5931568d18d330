'Physical quantities with dimensional analysis, units and uncertainty'

__version__ = version = '1.0'

__all__ = [
    'SI',
    'config',
    'dimensions',
    'format',
    'number',
    'quantity',
    'testing',
    'units',
    'warnings',
]

# vim:sw=2:sts=2:et
