# Copyright (c) 2014 Evalf
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
# THE SOFTWARE.

import types, contextlib, sys


class Config(types.ModuleType):
    '''
    This module holds the Measurand configuration, stored as (immutable)
    attributes.  To inspect the current configuration, use :func:`print` or
    :func:`vars` on this module.  The configuration can be changed temporarily
    by calling this module with the new settings passed as keyword arguments
    and entering the returned context.  The old settings are restored as soon
    as the context is exited.  Example:

    >>> from measurand import config
    >>> config.dynamic_typing
    True
    >>> with config(dynamic_typing=False):
    ...   # The configuration has been updated.
    ...   config.dynamic_typing
    False
    >>> # Exiting the context reverts the changes:
    >>> config.dynamic_typing
    True

    Functions that depend on a setting accept the configuration as an explicit
    ``config`` argument and fall back to this module only if it is omitted, so
    that a caller may pass a private instance instead:

    >>> fast = type(config)('fast', dynamic_typing=False, lenient=False,
    ...     precision=50, random_seed=None)

    .. Important::
       The configuration is not thread-safe: changing the configuration inside
       a thread changes the process wide configuration.

    The following configuration properties are used in Measurand.

    .. attribute:: dynamic_typing

       If ``True``, the result of an arithmetical operation on quantities is an
       instance of the quantity type registered for the resulting dimensions,
       e.g. a length divided by a time is a ``Speed``. If ``False`` all results
       are instances of :class:`measurand.quantity.MiscQuantity`, which avoids
       the registry lookup.

       Defaults to ``True``.

    .. attribute:: lenient

       Compatibility mode for legacy permissive behaviour. If ``True``, a
       missing (``None``) operand of a number is treated as the identity of
       the operation, unsupported numeric operations return a fixed default
       instead of raising, and metric prefixes may be applied to units that
       are not a metric base. Every such event emits a
       :class:`measurand.warnings.LegacyBehaviourWarning`.

       Defaults to ``False``.

    .. attribute:: precision

       Number of significant digits of :class:`measurand.number.Precise`
       values that are created without an explicit digit count.

       Defaults to ``50``.

    .. attribute:: random_seed

       Seed of the random generator that is used by
       :meth:`measurand.quantity.Quantity.random_sample` if no generator is
       passed. If ``None``, fresh entropy is drawn from the operating system.

       Defaults to ``None``.
    '''

    def __init__(*args, **data):
        self, name = args
        super(Config, self).__init__(name, self.__doc__)
        self.__dict__.update(data)

    def __setattr__(self, k, v):
        raise AttributeError('readonly attribute: {}'.format(k))

    def __delattr__(self, k):
        raise AttributeError('readonly attribute: {}'.format(k))

    @contextlib.contextmanager
    def __call__(*args, **data):
        if len(args) < 1:
            raise TypeError('__call__ takes at least 1 positional argument but none were given')
        self, *configs = args
        configs.append(data)
        old = self.__dict__.copy()
        try:
            for config in configs:
                if not isinstance(config, dict):
                    raise TypeError('expected a dict, got {}'.format(type(config).__name__))
                self.__dict__.update(config)
            yield
        finally:
            self.__dict__.clear()
            self.__dict__.update(old)

    def __str__(self):
        return 'configuration: {}'.format(', '.join('{}={!r}'.format(k, v) for k, v in sorted(self.__dict__.items()) if not k.startswith('_')))


sys.modules[__name__] = Config(
    __name__,
    dynamic_typing=True,
    lenient=False,
    precision=50,
    random_seed=None,
)

# vim:sw=4:sts=4:et
