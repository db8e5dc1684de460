"""Tree-sitter queries for Go.

The converter builds function bodies from the tree directly; these queries
pick out the file-level facts a compilation unit needs:
    - The package clause
    - Import paths (single and grouped import declarations)
"""

PACKAGE_QUERY = """
(package_clause
    (package_identifier) @package.name
) @package
"""

# Matches both `import "x"` and every entry of an `import ( ... )` group
IMPORT_QUERY = """
(import_spec
    path: (_) @import.path
) @import
"""
