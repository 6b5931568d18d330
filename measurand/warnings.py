import warnings


class MeasurandWarning(Warning):
    'Base class for warnings from Measurand.'


class LegacyBehaviourWarning(MeasurandWarning):
    'Warning about permissive behaviour that is only active in lenient mode.'


def legacy(message):
    warnings.warn(message, LegacyBehaviourWarning, stacklevel=3)


# vim:sw=4:sts=4:et
