"""chainkit: declarative LLM chains that turn questions into SQL or HTTP actions and answer from the results."""
