import logging

from .dialect import Dialect

logger = logging.getLogger(__name__)


class Builder(object):

    def __init__(self, config_path, options=None):
        """
        Initializes a configuration.

        :param config_path: The configuration file to use. Must be a valid
                            Python file. It must set ``CONFIG`` to a
                            :class:`wirecompat.config.Config`. It may set
                            ``DIALECT`` to override the dialect of
                            ``CONFIG``.
        :type config_path: :class:`str`
        :param options: A dictionary of key/value pairs with which the
                        global variable ``builder_args`` will be initialized
                        before the configuration is read.
        :raises ValueError: When the file does not set ``CONFIG``.
        """
        self.config_path = config_path

        self.local_conf = {
            'builder_args': options or {}
        }
        with open(self.config_path) as config_file:
            source = config_file.read()
        exec(compile(source, self.config_path, 'exec'), self.local_conf)

        self.config = self.local_conf.get("CONFIG")
        if self.config is None:
            raise ValueError("CONFIG is not set in " + self.config_path)

        dialect = self.local_conf.get("DIALECT", None)
        self.dialect = self.config.dialect if dialect is None \
            else Dialect.coerce(dialect)

        logger.debug("loaded %s: %s, dialect %s", self.config_path,
                     self.config, self.dialect.value)

    def __getattr__(self, name):
        # Looked up through __dict__ so that a failure in __init__ does
        # not make this recurse.
        local_conf = self.__dict__.get("local_conf", {})
        if name in local_conf:
            return local_conf[name]

        raise AttributeError("{!r} object has no attribute {!r}"
                             .format(self.__class__, name))

    def get_capabilities(self, desired_capabilities=None):
        """
        Creates the capability object to send when creating a session,
        on the basis of the configuration file upon which this object
        was created.

        :param desired_capabilities: Capabilities that the caller
            desires to override. These have priority over those
            capabilities that are set by the configuration file passed
            to the builder.
        :type desired_capabilities: :class:`dict`
        :returns: The capabilities, in the dialect of the configuration.
        :rtype: :class:`dict`
        """
        override_caps = desired_capabilities or {}

        caps = self.config.make_desired_capabilities()
        for (name, value) in override_caps.items():
            caps.set_capability(name, value)

        return caps.for_dialect(self.dialect)
