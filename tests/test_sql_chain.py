"""Tests for SQLDatabaseChain: generation path, fixed-command path and answer stage."""

import pytest

from src.chainkit.chains import SQLDatabaseChain
from src.chainkit.exceptions import ActionExecutionError, MissingInputError, UnknownResourceError
from src.chainkit.prompts import CMD_PROMPT, ORACLE_CMD_PROMPT, ORACLE_PROMPT, PROMPT
from src.chainkit.sql import SQLDatabase
from tests.fakes import FakeDatabase, FakeLLM


def test_generation_then_answer(database: SQLDatabase):
    llm = FakeLLM(["SELECT name FROM users;", "  Ada is the only user.\n"])
    chain = SQLDatabaseChain.from_llm(llm, database)
    assert chain.llm_chain.prompt is PROMPT

    assert chain.run("Who are the users?") == "Ada is the only user."

    generation_prompt, answer_prompt = llm.prompts
    assert generation_prompt.endswith("Question: Who are the users?\nSQLQuery:")
    assert "syntactically correct sqlite query" in generation_prompt
    assert "CREATE TABLE users" in generation_prompt
    assert "SQLQuery:SELECT name FROM users\nSQLResult:\nname\nAda\nAnswer:" in answer_prompt
    # stop marker on generation only
    assert llm.stops == [["\n\nSQLResult:"], None]


def test_generation_return_direct(database: SQLDatabase):
    llm = FakeLLM(["SQLQuery: SELECT id FROM orders ORDER BY id\nSQLResult:"])
    chain = SQLDatabaseChain.from_llm(llm, database, return_direct=True)
    assert chain.run("order ids") == "id\n1\n2"
    assert len(llm.prompts) == 1


def test_top_k_in_prompt(database: SQLDatabase):
    llm = FakeLLM(["SELECT 1"])
    SQLDatabaseChain.from_llm(llm, database, top_k=7, return_direct=True).run("q")
    assert "at most 7 results" in llm.prompts[0]


def test_allowed_tables_restrict_schema(database: SQLDatabase):
    llm = FakeLLM(["SELECT name FROM users"])
    chain = SQLDatabaseChain.from_llm(llm, database, return_direct=True)
    out = chain.call({"query": "names", "table_names_to_use": ["USERS"]})
    assert out["result"] == "name\nAda"
    assert out["query"] == "names"
    assert "CREATE TABLE users" in llm.prompts[0]
    assert "CREATE TABLE orders" not in llm.prompts[0]


def test_unknown_table_fails_before_model_call(database: SQLDatabase):
    llm = FakeLLM()
    chain = SQLDatabaseChain.from_llm(llm, database)
    with pytest.raises(UnknownResourceError):
        chain.call({"query": "q", "table_names_to_use": ["nope"]})
    assert llm.prompts == []


def test_sql_error_propagates(database: SQLDatabase):
    llm = FakeLLM(["SELECT nope FROM users"])
    chain = SQLDatabaseChain.from_llm(llm, database)
    with pytest.raises(ActionExecutionError):
        chain.run("q")
    # no answer call after a failed execution
    assert len(llm.prompts) == 1


def test_missing_query_input(database: SQLDatabase):
    chain = SQLDatabaseChain.from_llm(FakeLLM(), database)
    with pytest.raises(MissingInputError):
        chain.call({"question": "q"})


def test_fixed_command_substitutes_properties(database: SQLDatabase):
    llm = FakeLLM(["The user is Ada."])
    chain = SQLDatabaseChain.from_sql_cmd(
        llm, database, "SELECT name FROM users WHERE id = {user_id};", {"user_id": 1}
    )
    assert chain.llm_chain.prompt is CMD_PROMPT

    assert chain.run("Who is user 1?") == "The user is Ada."
    assert len(llm.prompts) == 1
    assert llm.stops == [None]
    assert "SELECT name FROM users WHERE id = 1\nSQLResult:\nname\nAda\nAnswer:" in llm.prompts[0]
    # the configured template is not mutated by a call
    assert chain.sql_cmd == "SELECT name FROM users WHERE id = {user_id};"


def test_fixed_command_return_direct_is_repeatable(database: SQLDatabase):
    llm = FakeLLM()
    chain = SQLDatabaseChain.from_sql_cmd(
        llm, database, "SELECT name FROM users WHERE id = {user_id}", {"user_id": 1}, return_direct=True
    )
    assert chain.run("q") == chain.run("q") == "name\nAda"
    assert llm.prompts == []


def test_fixed_command_update_count(database: SQLDatabase):
    chain = SQLDatabaseChain.from_sql_cmd(
        FakeLLM(), database, "UPDATE users SET name = '{name}' WHERE id = 1", {"name": "Bob"}, return_direct=True
    )
    assert chain.run("rename") == "Update Count: 1"


def test_intermediate_steps(database: SQLDatabase):
    llm = FakeLLM(["SELECT name FROM users", "Ada"])
    chain = SQLDatabaseChain.from_llm(llm, database, return_intermediate_steps=True)
    out = chain.call({"query": "names"}, return_only_outputs=True)
    assert out == {"result": "Ada", "intermediate_steps": ["SELECT name FROM users", "name\nAda"]}


def test_oracle_dialect_prompts():
    db = FakeDatabase(["ORDERS"], run_result="ID\n1")
    assert SQLDatabaseChain.from_llm(FakeLLM(), db).llm_chain.prompt is ORACLE_PROMPT
    assert SQLDatabaseChain.from_sql_cmd(FakeLLM(), db, "SELECT 1 FROM DUAL").llm_chain.prompt is ORACLE_CMD_PROMPT


def test_generated_command_is_normalized():
    db = FakeDatabase(["ORDERS"], run_result="ID\n1")
    llm = FakeLLM(["SQLQuery: SELECT ID FROM ORDERS;\nSQLResult:"])
    SQLDatabaseChain.from_llm(llm, db, return_direct=True).run("ids")
    assert db.commands == [" SELECT ID FROM ORDERS"]
