"""optionalkit: an explicit Optional container for Python 3.13+.

Flat imports (preferred):
    from optionalkit import Optional, some, empty, from_nullable
    from optionalkit import group, clean_optional, instance_of_optional

Submodule imports (for organization):
    from optionalkit.option import Present, AbsentType, Optional
    from optionalkit.constructors import some, from_nullable, empty_function
    from optionalkit.combinators import group, clean_optional
    from optionalkit.protocol import OptionalLike, instance_of_optional
"""

# Configuration
from optionalkit._config import LogFormat, OptionalConfig, get_config, init

# Logging
from optionalkit._logging import configure_logging, get_logger

# Combinators
from optionalkit.combinators import clean_optional, group

# Constructors
from optionalkit.constructors import empty_function, from_nullable, some

# Types
from optionalkit.option import AbsentType, Optional, Present, empty, strict_equals

# Structural check
from optionalkit.protocol import OPTIONAL_MEMBERS, OptionalLike, instance_of_optional

__all__ = [
    'OPTIONAL_MEMBERS',
    # Types
    'AbsentType',
    # Configuration
    'LogFormat',
    'Optional',
    'OptionalConfig',
    'OptionalLike',
    'Present',
    # Combinators
    'clean_optional',
    # Logging
    'configure_logging',
    'empty',
    # Constructors
    'empty_function',
    'from_nullable',
    'get_config',
    'get_logger',
    'group',
    'init',
    'instance_of_optional',
    'some',
    'strict_equals',
]
