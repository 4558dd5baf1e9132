"""
Shared constants for the Code Context MCP server.
"""

# Name of the per-directory ignore file honoured during traversal
IGNORE_FILE_NAME = ".gitignore"

# Supported file extensions for symbol extraction, mapped to the grammar
# that parses them. The JavaScript grammar is reused for TypeScript sources.
SUPPORTED_LANGUAGES = {
    'js': 'javascript',
    'jsx': 'javascript',
    'ts': 'javascript',
    'tsx': 'javascript',
    'py': 'python',
}

# Python modules providing each tree-sitter grammar
GRAMMAR_MODULES = {
    'javascript': 'tree_sitter_javascript',
    'python': 'tree_sitter_python',
}

# Ignore patterns applied at every directory level, before any .gitignore
DEFAULT_IGNORE_PATTERNS = [
    r'^node_modules($|/)',
    r'^\.git($|/)',
    r'\.log$',
    r'\.tmp$',
    r'\.temp$',
    r'\.swp$',
    r'\.DS_Store$',
    r'\.vscode($|/)',
    r'\.idea($|/)',
    r'\.vs($|/)',
    r'^dist($|/)',
    r'^build($|/)',
    r'^coverage($|/)',
]

# Symbol kinds that can be listed per analyzed file
SYMBOL_TYPES = ('functions', 'variables', 'classes', 'imports', 'exports', 'all')

DEFAULT_SYMBOL_TYPE = 'all'

# Maximum directory depth for code analysis (tree listing is unbounded)
DEFAULT_MAX_DEPTH = 5

# Name used for functions whose name cannot be recovered
ANONYMOUS = 'anonymous'

# Significance thresholds for function extraction (characters of source text)
MIN_INLINE_FUNCTION_LENGTH = 15
MAX_CALLBACK_LENGTH = 50
MIN_ANONYMOUS_FUNCTION_LENGTH = 100
CALLBACK_CONTEXT_PREFIX = 30

# Array methods whose short inline callbacks are not worth reporting
CALLBACK_METHODS = ('.map(', '.filter(', '.foreach(', '.find(', '.reduce(')

# Promise-chain methods whose callbacks are named after the method
PROMISE_CHAIN_METHODS = ('then', 'catch', 'finally')
