import configparser
import os
import random

class Config:

    # Attributes checked on every assignment: name => (predicate, description)
    _CHECKS = {
        'num_neurons'     : (lambda v: v > 0,  "positive"),
        'mutation_std_dev': (lambda v: v >= 0, "non-negative"),
        'num_steps'       : (lambda v: v > 0,  "positive"),
        'report_interval' : (lambda v: v >= 0, "non-negative"),
        }

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a default Config.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a Config with default values,
                         suitable for testing and manual attribute setting.
        """

        # Default config for testing/manual setup
        if config_file is None:
            self.num_neurons      = 3
            self.mutation_std_dev = 0.1
            self.num_steps        = 100
            self.report_interval  = 0
            self.seed             = None
            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise

        # [GENOME]

        # The number of neurons in the fully-interconnected networks encoded
        # by the genomes. Every neuron receives an external input.
        self.num_neurons = get_value('GENOME', 'num_neurons', int)

        # The standard deviation of the zero-centered normal distribution
        # from which each gene perturbation is drawn when mutating a genome.
        # Genes live in [0, 1], so sensible values are well below 1.
        self.mutation_std_dev = get_value('GENOME', 'mutation_std_dev', float)

        # [SIMULATION]

        # The number of discrete time steps a network is simulated for.
        self.num_steps = get_value('SIMULATION', 'num_steps', int)

        # Report the network state every this many steps.
        # Use 0 to only produce the final report.
        self.report_interval = get_value('SIMULATION', 'report_interval', int, default=0)

        # [RANDOM]

        # Seed of the random source handed to genome creation and mutation.
        # Use "None" for a seed taken from the operating system.
        self.seed = get_value('RANDOM', 'seed', int, default=None)

    def make_rng(self) -> random.Random:
        """
        Create a new uniform random source seeded from this configuration.

        Every call returns an independent generator; with a fixed 'seed' each
        of them produces the same sequence.
        """
        return random.Random(self.seed)

    def __setattr__(self, name, value):
        """
        Override 'setattr' to validate numeric parameters whenever they are set,
        either from the configuration file or manually.
        """
        if name in Config._CHECKS:
            predicate, description = Config._CHECKS[name]
            if value is None or not predicate(value):
                raise ValueError(f"Configuration parameter '{name}' must be {description}, got {value}")
        super().__setattr__(name, value)
