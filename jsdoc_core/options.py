import json
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional


class FilterOption(Enum):
    INCLUDE_PRIVATE = 'include-private'
    ALL_FUNCTIONS = 'all-functions'
    ALL_FUNCTIONS_UNDERSCORED = 'all-functions-underscored'


# (option, description) pairs, in the order they are listed to users
FILTER_OPTION_DESCRIPTIONS = [
    (FilterOption.INCLUDE_PRIVATE, 'Include symbols tagged as private.'),
    (FilterOption.ALL_FUNCTIONS, 'Include all functions, even undocumented ones.'),
    (FilterOption.ALL_FUNCTIONS_UNDERSCORED, 'Include all functions, even undocumented, underscored ones.'),
]

DEFAULT_TEMPLATE = 'json'
DEFAULT_DIRECTORY = Path('js_docs_out')
DEFAULT_EXTENSIONS = ['js']


class DocOptions:
    """
    Settings for one documentation run.

    Passed explicitly to the resolver and publishers; nothing reads options
    from global state.
    """

    _FIELDS = ('include_private', 'all_functions', 'all_functions_underscored',
               'template', 'directory', 'recurse', 'extensions', 'log_dir')

    def __init__(
        self,
        include_private: bool = False,
        all_functions: bool = False,
        all_functions_underscored: bool = False,
        template: str = DEFAULT_TEMPLATE,
        directory: Path = DEFAULT_DIRECTORY,
        recurse: int = 0,
        extensions: Optional[List[str]] = None,
        log_dir: Optional[Path] = None
    ):
        self.include_private = include_private
        self.all_functions = all_functions
        self.all_functions_underscored = all_functions_underscored
        self.template = template
        self.directory = Path(directory)
        self.recurse = recurse
        self.extensions = list(extensions) if extensions else list(DEFAULT_EXTENSIONS)
        self.log_dir = Path(log_dir) if log_dir else None

    def is_set(self, option: FilterOption) -> bool:
        if option == FilterOption.INCLUDE_PRIVATE:
            return self.include_private
        elif option == FilterOption.ALL_FUNCTIONS:
            return self.all_functions
        elif option == FilterOption.ALL_FUNCTIONS_UNDERSCORED:
            return self.all_functions_underscored
        raise ValueError(f"Unsupported option: {option}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DocOptions':
        """Build options from a dict; keys may use '-' or '_'."""
        kwargs = {}
        for key, value in data.items():
            field = key.replace('-', '_')
            if field not in cls._FIELDS:
                raise KeyError(f"Unknown option '{key}'")
            kwargs[field] = value
        return cls(**kwargs)

    @classmethod
    def from_json_file(cls, config_path: Path) -> 'DocOptions':
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found at {config_path}")

        with open(config_path, 'r') as f:
            return cls.from_dict(json.load(f))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'include_private': self.include_private,
            'all_functions': self.all_functions,
            'all_functions_underscored': self.all_functions_underscored,
            'template': self.template,
            'directory': str(self.directory),
            'recurse': self.recurse,
            'extensions': list(self.extensions),
            'log_dir': str(self.log_dir) if self.log_dir else None,
        }

    def __repr__(self) -> str:
        return f"DocOptions({self.to_dict()})"
