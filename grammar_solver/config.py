import json
import os


class Config(object):
    def __init__(self, config_path):
        # Load values from configuration file
        self.config_path = config_path
        with open(config_path, 'r') as f:
            self.cfg = json.loads(f.read())

        self.grammar = None
        self.symbols = None
        self.count = 0
        self.seed = None
        self.check = False

        # Check validity
        self.validate()

        # Load grammar file (relative to the config file) and derivations per symbol
        self.grammar = os.path.join(os.path.dirname(config_path), self.cfg['grammar'])
        self.count = int(self.cfg['count'])

        # Load random seed (if specified)
        self.seed = int(self.cfg['seed']) if self.cfg.get('seed') is not None else None

        # Load symbols to derive (if specified, otherwise they are prompted for)
        if 'symbols' in self.cfg:
            self.symbols = list(self.cfg['symbols'])

        if 'check' in self.cfg:
            self.check = bool(self.cfg['check'])

    def validate(self):
        # Ensure configuration file has all necessary keys
        assert 'grammar' in self.cfg, 'Config file must specify a grammar file (e.g., "grammar": "sentence.txt")'
        assert 'count' in self.cfg, 'Config file must specify number of derivations (e.g., "count": x)'

        # Check whether values are reasonable
        assert int(self.cfg['count']) > 0, 'Number of derivations must be positive'

        if 'symbols' in self.cfg:
            assert isinstance(self.cfg['symbols'], list), 'Symbols must be a list (e.g., ["<s>", "<np>"])'
            for s in self.cfg['symbols']:
                assert isinstance(s, str) and s, 'Each symbol must be a non-empty string'
