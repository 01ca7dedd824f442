"""Prompts for SQL database chains: query generation, command answering, table decider."""

from langchain_core.output_parsers import CommaSeparatedListOutputParser

from .template import PromptTemplate

# Markers shared by the prompts and by command extraction.
SQL_QUERY_MARKER = "SQLQuery:"
SQL_RESULT_MARKER = "SQLResult:"
ANSWER_MARKER = "Answer:"
# Generation halts here so the model does not invent a result.
SQL_RESULT_STOP = "\n\nSQLResult:"

PROMPT_SUFFIX = """
Only use the following tables:
{table_info}

Question: {input}"""

_DEFAULT_TEMPLATE = """Given an input question, first create a syntactically correct {dialect} query to run, then look at the results of the query and return the answer. Unless the user specifies in the question a specific number of examples to obtain, always limit your query to at most {top_k} results. You can order the results by a relevant column to return the most interesting examples in the database.
Never query for all the columns from a specific table, only ask for the few relevant columns given the question.
Pay attention to use only the column names that you can see in the schema description. Be careful to not query for columns that do not exist. Also, pay attention to which column is in which table.

Use the following format:

Question: Question here
SQLQuery: SQL Query to run
SQLResult: Result of the SQLQuery
Answer: Final answer here
"""

PROMPT = PromptTemplate(
    _DEFAULT_TEMPLATE + PROMPT_SUFFIX,
    input_variables=["input", "table_info", "dialect", "top_k"],
)

_CMD_TEMPLATE = """Given an input question and the result of a {dialect} query that was already run, look at the result and return the answer to the input question.
Use the following format:

Question: Question here
SQLResult: Result of the SQLQuery
Answer: Final answer here
"""

CMD_PROMPT = PromptTemplate(
    _CMD_TEMPLATE + PROMPT_SUFFIX,
    input_variables=["input", "table_info", "dialect"],
)

_ORACLE_TEMPLATE = """You are an Oracle SQL expert. Given an input question, first create a syntactically correct Oracle SQL query to run, then look at the results of the query and return the answer to the input question.
Unless the user specifies in the question a specific number of examples to obtain, query for at most {top_k} results using the FETCH FIRST n ROWS ONLY clause as per Oracle SQL. You can order the results to return the most informative data in the database.
Never query for all columns from a table. You must query only the columns that are needed to answer the question. Wrap each column name in double quotes (") to denote them as delimited identifiers.
Pay attention to use only the column names you can see in the tables below. Be careful to not query for columns that do not exist. Also, pay attention to which column is in which table.
Pay attention to use TRUNC(SYSDATE) function to get the current date, if the question involves "today".
Use the following format:

Question: Question here
SQLQuery: SQL Query to run
SQLResult: Result of the SQLQuery
Answer: Final answer here
"""

ORACLE_PROMPT = PromptTemplate(
    _ORACLE_TEMPLATE + PROMPT_SUFFIX,
    input_variables=["input", "table_info", "top_k"],
)

_ORACLE_CMD_TEMPLATE = """You are an Oracle SQL expert. Given an input question and the result of a SQL query that was already run, look at the result and return the answer to the input question.
Use the following format:

Question: Question here
SQLResult: Result of the SQLQuery
Answer: Final answer here
"""

ORACLE_CMD_PROMPT = PromptTemplate(
    _ORACLE_CMD_TEMPLATE + PROMPT_SUFFIX,
    input_variables=["input", "table_info", "top_k"],
)

_DECIDER_TEMPLATE = """Given the below input question and list of potential tables, output a comma separated list of the table names that may be necessary to answer this question.

Question: {query}

Table Names: {table_names}

Relevant Table Names:"""

DECIDER_PROMPT = PromptTemplate(
    _DECIDER_TEMPLATE,
    input_variables=["query", "table_names"],
    output_parser=CommaSeparatedListOutputParser(),
)

SQL_PROMPTS = {
    "oracle": ORACLE_PROMPT,
    "oracle_cmd": ORACLE_CMD_PROMPT,
}


def prompt_for_dialect(dialect: str) -> PromptTemplate:
    """Dialect-specific generation prompt, falling back to the generic one."""
    return SQL_PROMPTS.get((dialect or "").lower(), PROMPT)


def command_prompt_for_dialect(dialect: str) -> PromptTemplate:
    """Prompt used to answer from a caller-supplied command's result."""
    return SQL_PROMPTS.get(f"{(dialect or '').lower()}_cmd", CMD_PROMPT)
