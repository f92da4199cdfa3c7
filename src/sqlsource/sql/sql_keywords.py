"""
Reserved SQL words recognised by the highlighter.

The set covers DDL, DML, transaction control and the PSQL control flow used
in stored procedures and triggers.  Entries are upper case; lookups fold the
case of the word being tested.
"""

from typing import FrozenSet


SQL_KEYWORDS: FrozenSet[str] = frozenset({
    # DML
    'SELECT', 'FROM', 'WHERE', 'AND', 'OR', 'NOT', 'INSERT', 'INTO', 'VALUES',
    'UPDATE', 'SET', 'DELETE', 'MERGE', 'MATCHING', 'RETURNING', 'DISTINCT',
    'JOIN', 'LEFT', 'RIGHT', 'INNER', 'OUTER', 'FULL', 'CROSS', 'NATURAL',
    'USING', 'ON', 'AS', 'IS', 'NULL', 'IN', 'EXISTS', 'BETWEEN', 'LIKE',
    'CONTAINING', 'STARTING', 'SIMILAR', 'ESCAPE', 'CASE', 'WHEN', 'ELSE',
    'GROUP', 'BY', 'ORDER', 'ASC', 'DESC', 'HAVING', 'LIMIT', 'OFFSET', 'ROWS',
    'FIRST', 'SKIP', 'FETCH', 'UNION', 'ALL', 'WITH', 'RECURSIVE', 'TO',

    # DDL
    'CREATE', 'ALTER', 'DROP', 'RECREATE', 'TABLE', 'VIEW', 'TRIGGER',
    'PROCEDURE', 'FUNCTION', 'PACKAGE', 'GENERATOR', 'SEQUENCE', 'DOMAIN',
    'EXCEPTION', 'INDEX', 'COLUMN', 'ADD', 'PRIMARY', 'KEY', 'FOREIGN',
    'REFERENCES', 'CONSTRAINT', 'UNIQUE', 'CHECK', 'DEFAULT', 'COMPUTED',
    'CASCADE', 'RESTRICT', 'GLOBAL', 'TEMPORARY', 'ACTIVE', 'INACTIVE',
    'POSITION', 'BEFORE', 'AFTER', 'INSERTING', 'UPDATING', 'DELETING',
    'GRANT', 'REVOKE',

    # Transaction control
    'COMMIT', 'ROLLBACK', 'WORK', 'TRANSACTION', 'SAVEPOINT', 'RELEASE',
    'RETAIN', 'SNAPSHOT', 'ISOLATION', 'LEVEL', 'READ', 'WRITE', 'COMMITTED',
    'AUTONOMOUS',

    # PSQL
    'EXECUTE', 'STATEMENT', 'BLOCK', 'RETURNS', 'DECLARE', 'VARIABLE', 'CURSOR',
    'OPEN', 'CLOSE', 'BEGIN', 'END', 'IF', 'THEN', 'WHILE', 'DO', 'FOR',
    'SUSPEND', 'EXIT', 'LEAVE', 'BREAK', 'CONTINUE', 'NEW', 'OLD',
    'POST_EVENT', 'RETURNING_VALUES',
})


def is_keyword(word: str) -> bool:
    """
    Check if a word is a reserved SQL keyword, ignoring case.

    Args:
        word: The word to check

    Returns:
        True if the word is a keyword, False otherwise
    """
    return word.upper() in SQL_KEYWORDS
