import logging
import os
import platform

from configobj import ConfigObj, ConfigObjError, Section
from validate import Validator

logger = logging.getLogger(__name__)

# The default extension for configuration files
config_extension = '.cfg'


def config_flavor(name, flavor=None):
    """
    >>> config_flavor('pipefitting', 'default')
    'pipefitting.default'
    >>> config_flavor('pipefitting')
    'pipefitting'
    """
    return name if not flavor else name + '.' + flavor


def config_filename(name, directory):
    return os.path.join(directory, name + config_extension)


def load_config_file_base(file, must_exist=True):
    """
    Loads a configuration file
    :param file:        The configuration file to load
    :param must_exist:  when True, the file must exist or an exception is thrown.
    :return: The ConfigObj instance for the file.
    """
    try:
        return ConfigObj(file, interpolation='Template', file_error=must_exist) \
            if must_exist or os.path.exists(file) else ConfigObj()
    except ConfigObjError as e:
        raise type(e)(str(e) + ' at ' + file)


def load_config_spec(file):
    """
    Loads a validation schema. Check functions such as option('A', 'B') contain commas,
    so the file is read without list value parsing.
    """
    if not os.path.exists(file):
        return ConfigObj(_inspec=True)
    try:
        return ConfigObj(file, _inspec=True, list_values=False)
    except ConfigObjError as e:
        raise type(e)(str(e) + ' at ' + file)


def config_flavor_file(name, directory, subpart=None) -> ConfigObj:
    """
    Loads a specialization of a config file. The file is named after the base, followed by a
    period and then the specialization, if given, otherwise just the base name.
    A missing file yields an empty configuration.
    """
    return load_config_file_base(config_filename(config_flavor(name, subpart), directory), False)


def map_os_name(name):
    """
    >>> map_os_name('Windows')
    'windows'
    >>> map_os_name("Darwin")
    'osx'
    """
    name = name.lower()
    if name == 'darwin':
        name = 'osx'
    return name


def os_name():
    return map_os_name(platform.system())


def load_config(name, directory):
    """
        Loads all the configuration files that relate to the given name.
        Configurations are merged in this order, later ones overriding earlier ones:
        - the default specialization
        - the platform specialization
        - the user override (~/<name>.cfg)
        - the base configuration
        The merged configuration is validated against the schema specialization, which also
        supplies defaults for missing values.
    :directory: the location of the configuration files
    :return: the merged ConfigObj
    """
    local_config = config_flavor_file(name, directory)
    default_config = config_flavor_file(name, directory, 'default')
    platform_config = config_flavor_file(name, directory, os_name())
    user_config = load_config_file_base(os.path.expanduser(
        '~/' + name + config_extension), must_exist=False)
    config = ConfigObj()
    config.merge(default_config)
    config.merge(platform_config)
    config.merge(user_config)
    config.merge(local_config)

    config.configspec = load_config_spec(config_filename(config_flavor(name, 'schema'), directory))
    result = config.validate(Validator())
    if result is not True:
        raise ConfigObjError("the config file %s failed validation %s" % (name, result))
    return config


def fetch_conf_path(conf: Section, path):
    """
    Retrieves the named configuration section
    :param conf:    The root configuration
    :param path:    An iterable of the section names to descend through
    :return: The configuration section identified by the path, or None
    """
    for p in path:
        conf = conf.get(p, None)
        if conf is None:
            return None
    return conf


def apply_conf(conf: Section, target):
    """
    Sets each configured value on the target, for attributes the target already has.
    Values for unknown attributes are ignored.
    """
    for k, v in conf.items():
        if hasattr(target, k):
            setattr(target, k, v)
        else:
            logger.debug("ignoring configuration value %s, %s has no such attribute" % (k, target))


def apply_conf_path(conf: Section, name_parts, target):
    conf = fetch_conf_path(conf, name_parts)
    if conf:
        apply_conf(conf, target)


def apply(target, config_path, config_name, directory):
    """
    Applies defined values from a path to a given target object.
    :param target: The object to receive the values defined
    :param config_path: The path that is the prefix to the values defined. The path is split on '.'.
    :param config_name: The configuration file to load.
    :param directory: the directory containing the config files
    """
    conf = load_config(config_name, directory)
    apply_conf_path(conf, config_path.split('.'), target)


def fq_module_name(module):
    """
    Retrieves the fully qualified name of the module.
    """
    if not module.__package__:
        raise ConfigObjError('module has no package defined')
    return module.__name__


def configure_module(module, config_name=None):
    """
    Applies the configuration to the given module.

    The settings are nested in sections that follow the module's location (x.y.module), and are
    loaded from configuration files in the module's directory named after config_name,
    or after the module itself when config_name is not given.
    """
    fqname = fq_module_name(module)
    if not config_name:
        config_name = fqname.split('.')[-1]
    logger.debug("configuring %s from %s" % (fqname, config_name))
    apply(module, fqname, config_name, os.path.dirname(module.__file__))
