"""Errors raised while turning a configuration file into a policy."""


class ConfigError(Exception):
    """The configuration file could not be read or has the wrong shape.

    Covers unreadable files, malformed JSON, a non-object root, missing
    required fields and fields of the wrong type.
    """


class PolicyValidationError(ConfigError):
    """The configuration parsed, but the policy it describes is not usable.

    Raised when ``startUrl`` is empty, is not a well-formed URL, or does not
    use the ``https`` scheme.
    """
