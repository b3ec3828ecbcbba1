"""Tests for the GraphQL interaction builder.

Covers:
- Operation validation
- Query validation and the whitespace-tolerant query matcher
- Finalization checks and ordering
- Merging of caller-supplied request fields with derived ones
"""

from __future__ import annotations

import pytest

from pactum.errors import (
    InvalidOperationError,
    InvalidQueryError,
    MissingDescriptionError,
    MissingQueryError,
    ValidationError,
)
from pactum.graphql import GraphQLInteraction, GraphQLOperation
from pactum.interaction import InteractionSpecification
from pactum.matchers import MatcherDescriptor


class TestWithOperation:
    """Tests for with_operation."""

    @pytest.mark.parametrize("operation", ["query", "mutation"])
    def test_accepts_valid_strings(self, graphql_interaction: GraphQLInteraction, operation: str) -> None:
        spec = graphql_interaction.with_operation(operation).json()
        assert spec.request["body"]["operationName"] == operation

    @pytest.mark.parametrize("operation", [GraphQLOperation.QUERY, GraphQLOperation.MUTATION])
    def test_accepts_enum_members(
        self, graphql_interaction: GraphQLInteraction, operation: GraphQLOperation
    ) -> None:
        graphql_interaction.with_operation(operation)
        assert graphql_interaction.operation is operation

    @pytest.mark.parametrize(
        "operation",
        ["subscription", "Query", "", None, "get", GraphQLOperation.UNSPECIFIED],
    )
    def test_rejects_everything_else(self, operation: object) -> None:
        with pytest.raises(InvalidOperationError) as exc_info:
            GraphQLInteraction().with_operation(operation)  # type: ignore[arg-type]
        assert "query, mutation" in str(exc_info.value)

    def test_last_write_wins(self, graphql_interaction: GraphQLInteraction) -> None:
        spec = graphql_interaction.with_operation("query").with_operation("mutation").json()
        assert spec.request["body"]["operationName"] == "mutation"

    def test_omitted_operation_is_null(self, graphql_interaction: GraphQLInteraction) -> None:
        assert graphql_interaction.operation is GraphQLOperation.UNSPECIFIED
        assert graphql_interaction.json().request["body"]["operationName"] is None

    def test_rejected_operation_keeps_previous(self, graphql_interaction: GraphQLInteraction) -> None:
        graphql_interaction.with_operation("mutation")
        with pytest.raises(InvalidOperationError):
            graphql_interaction.with_operation("subscription")
        assert graphql_interaction.operation is GraphQLOperation.MUTATION


class TestWithVariables:
    """Tests for with_variables."""

    def test_default_is_empty(self, graphql_interaction: GraphQLInteraction) -> None:
        assert dict(graphql_interaction.json().request["body"]["variables"]) == {}

    def test_replaces_wholesale(self, graphql_interaction: GraphQLInteraction) -> None:
        spec = graphql_interaction.with_variables({"a": 1}).with_variables({"b": 2}).json()
        assert dict(spec.request["body"]["variables"]) == {"b": 2}

    def test_nested_values(self, graphql_interaction: GraphQLInteraction) -> None:
        variables = {"filter": {"ids": [1, 2], "active": True, "name": None}}
        spec = graphql_interaction.with_variables(variables).json()
        assert spec.to_dict()["request"]["body"]["variables"] == variables

    def test_none_means_empty(self, graphql_interaction: GraphQLInteraction) -> None:
        spec = graphql_interaction.with_variables(None).json()
        assert dict(spec.request["body"]["variables"]) == {}


class TestWithQuery:
    """Tests for with_query."""

    @pytest.mark.parametrize("query", ["", None, "   \n"])
    def test_rejects_missing_query(self, query: str | None) -> None:
        with pytest.raises(MissingQueryError):
            GraphQLInteraction().with_query(query)

    @pytest.mark.parametrize("query", [123, b"{ projects { id } }", ["{ projects { id } }"]])
    def test_rejects_non_string_query(self, query: object) -> None:
        with pytest.raises(InvalidQueryError) as exc_info:
            GraphQLInteraction().with_query(query)  # type: ignore[arg-type]
        assert isinstance(exc_info.value, ValidationError)
        assert exc_info.value.expected == "str"

    def test_rejects_malformed_query_immediately(self) -> None:
        with pytest.raises(InvalidQueryError) as exc_info:
            GraphQLInteraction().with_query("{ invalid")
        assert "Syntax Error" in exc_info.value.message
        assert exc_info.value.cause is not None
        assert exc_info.value.cause.message in exc_info.value.message

    def test_stores_literal_string(self, projects_query: str) -> None:
        interaction = GraphQLInteraction().with_query(projects_query)
        assert interaction.query == projects_query

    def test_accepts_named_operations(self) -> None:
        query = "mutation AddProject($name: String!) { addProject(name: $name) { id } }"
        assert GraphQLInteraction().with_query(query).query == query


class TestJson:
    """Tests for finalization."""

    def test_requires_query(self) -> None:
        interaction = GraphQLInteraction().upon_receiving("desc").given("state").with_variables({})
        with pytest.raises(MissingQueryError):
            interaction.json()

    def test_requires_description(self, projects_query: str) -> None:
        interaction = GraphQLInteraction().given("i have a list of projects").with_query(projects_query)
        with pytest.raises(MissingDescriptionError):
            interaction.json()

    def test_rejects_empty_description(self, projects_query: str) -> None:
        interaction = GraphQLInteraction().upon_receiving("").with_query(projects_query)
        with pytest.raises(MissingDescriptionError):
            interaction.json()

    def test_query_is_checked_before_description(self) -> None:
        with pytest.raises(MissingQueryError):
            GraphQLInteraction().json()

    def test_end_to_end(self, projects_query: str) -> None:
        spec = (
            GraphQLInteraction()
            .upon_receiving("a request for projects")
            .given("i have a list of projects")
            .with_query(projects_query)
            .with_variables({})
            .json()
        )
        assert isinstance(spec, InteractionSpecification)
        assert spec.description == "a request for projects"
        assert spec.provider_state == "i have a list of projects"
        assert spec.request["method"] == "POST"
        assert spec.request["headers"]["content-type"] == "application/json"

        query = spec.request["body"]["query"]
        assert isinstance(query, MatcherDescriptor)
        assert query.generate == projects_query
        assert query.matches("{\n  Category(id:7) {\n    id\n    name\n  }\n}")

    def test_response_is_carried(self, graphql_interaction: GraphQLInteraction) -> None:
        spec = graphql_interaction.json()
        assert spec.response["status"] == 200
        assert spec.response["body"]["data"]["Category"]["id"] == 7

    def test_to_dict_renders_query_term(self, graphql_interaction: GraphQLInteraction) -> None:
        body = graphql_interaction.json().to_dict()["request"]["body"]
        assert body["query"]["json_class"] == "Pact::Term"
        assert body["query"]["data"]["generate"] == "{ Category(id:7) { id name } }"
        assert body["operationName"] is None

    def test_json_can_be_called_again(self, graphql_interaction: GraphQLInteraction) -> None:
        first = graphql_interaction.json()
        second = graphql_interaction.with_variables({"id": 7}).json()
        assert dict(first.request["body"]["variables"]) == {}
        assert dict(second.request["body"]["variables"]) == {"id": 7}


class TestRequestMerge:
    """Caller-supplied request fields win over derived ones."""

    def test_custom_header_kept_and_content_type_added(self, graphql_interaction: GraphQLInteraction) -> None:
        spec = graphql_interaction.with_request(headers={"X-Custom": "1"}).json()
        assert dict(spec.request["headers"]) == {
            "X-Custom": "1",
            "content-type": "application/json",
        }
        assert spec.request["method"] == "POST"

    def test_caller_method_wins(self, graphql_interaction: GraphQLInteraction) -> None:
        spec = graphql_interaction.with_request(method="PUT", headers={"X-Custom": "1"}).json()
        assert spec.request["method"] == "PUT"

    def test_caller_content_type_wins_in_any_case(self, graphql_interaction: GraphQLInteraction) -> None:
        spec = graphql_interaction.with_request(headers={"Content-Type": "application/graphql+json"}).json()
        assert dict(spec.request["headers"]) == {"Content-Type": "application/graphql+json"}

    def test_caller_path_is_kept(self, graphql_interaction: GraphQLInteraction) -> None:
        spec = graphql_interaction.with_request(path="/graphql").json()
        assert spec.request["path"] == "/graphql"

    def test_caller_body_fields_win(self, graphql_interaction: GraphQLInteraction) -> None:
        spec = graphql_interaction.with_request(body={"query": "{ fixed }"}).json()
        body = spec.request["body"]
        assert body["query"] == "{ fixed }"
        assert body["operationName"] is None
        assert dict(body["variables"]) == {}

    def test_with_request_order_does_not_matter(self, projects_query: str) -> None:
        before = (
            GraphQLInteraction()
            .with_request(headers={"X-Custom": "1"})
            .upon_receiving("desc")
            .with_query(projects_query)
            .json()
        )
        after = (
            GraphQLInteraction()
            .upon_receiving("desc")
            .with_query(projects_query)
            .with_request(headers={"X-Custom": "1"})
            .json()
        )
        assert before == after
