"""Tests for the compatibility scorer — LLM calls are mocked."""
import uuid
from decimal import Decimal
from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from apps.ai_engine import prompts
from apps.ai_engine.scoring import CompatibilityScorer, build_prompt, parse_scores
from apps.matching.config import MatchingConfig
from apps.matching.types import InvestorCandidate, MatchRequest, Preferences, ProjectCandidate

from .conftest import make_completion


def _projects(n):
    return [
        ProjectCandidate(
            id=uuid.uuid4(),
            title=f"Projet {i}",
            sector="technology",
            description="Plateforme SaaS",
            funding_goal=Decimal("250000"),
            location="Paris",
            owner_name="Marc Fondateur",
        )
        for i in range(n)
    ]


def _request(role="investor", **prefs):
    return MatchRequest(
        requesting_user_id=uuid.uuid4(),
        requesting_user_role=role,
        preferences=Preferences(**prefs),
    )


def _requester():
    return MagicMock(full_name="Claire Investit", bio="", location="Lyon", company="Capital Lyon")


class TestParseScores:
    def test_valid_response(self):
        content = '{"matches": [{"candidate_index": 0, "score": 85, "reasons": ["a", "b"]}, {"candidate_index": 1, "score": 40, "reasons": ["c"]}]}'
        scores = parse_scores(content, 2)
        assert scores[0].score == 85
        assert scores[0].reasons == ("a", "b")
        assert scores[1].score == 40

    def test_legacy_project_index_key(self):
        scores = parse_scores('{"matches": [{"projectIndex": 1, "score": 70, "reasons": []}]}', 2)
        assert list(scores) == [1]

    def test_strips_markdown_fences(self):
        content = '```json\n{"matches": [{"candidate_index": 0, "score": 90, "reasons": ["x"]}]}\n```'
        assert parse_scores(content, 1)[0].score == 90

    def test_not_json(self):
        assert parse_scores("Voici mon analyse : très bon projet", 3) == {}

    def test_missing_matches_key(self):
        assert parse_scores('{"results": []}', 3) == {}
        assert parse_scores("[1, 2, 3]", 3) == {}

    def test_scores_clamped_and_reasons_truncated(self):
        content = '{"matches": [{"candidate_index": 0, "score": 150, "reasons": ["1", "2", "3", "4"]}, {"candidate_index": 1, "score": -5}]}'
        scores = parse_scores(content, 2)
        assert scores[0].score == 100
        assert len(scores[0].reasons) == 3
        assert scores[1].score == 0
        assert scores[1].reasons == ()

    def test_invalid_entries_skipped(self):
        content = (
            '{"matches": ['
            '{"candidate_index": 7, "score": 80},'
            '{"candidate_index": "0", "score": 80},'
            '{"candidate_index": 1, "score": "high"},'
            '{"candidate_index": 2, "score": 66, "reasons": ["ok"]},'
            '"garbage"'
            ']}'
        )
        scores = parse_scores(content, 3)
        assert list(scores) == [2]

    def test_zero_is_a_valid_score(self):
        scores = parse_scores('{"matches": [{"candidate_index": 0, "score": 0, "reasons": ["non"]}]}', 1)
        assert scores[0].score == 0

    def test_score_too_large_for_float_is_dropped(self):
        content = (
            '{"matches": [{"candidate_index": 0, "score": 1' + "0" * 400 + '},'
            ' {"candidate_index": 1, "score": 77}]}'
        )
        scores = parse_scores(content, 2)
        assert list(scores) == [1]

    def test_integer_over_digit_limit_is_not_json(self):
        content = '{"matches": [{"candidate_index": 0, "score": ' + "9" * 5001 + "}]}"
        assert parse_scores(content, 1) == {}

    def test_non_finite_scores_dropped(self):
        content = '{"matches": [{"candidate_index": 0, "score": NaN}, {"candidate_index": 1, "score": Infinity}]}'
        assert parse_scores(content, 2) == {}


class TestBuildPrompt:
    def test_investor_prompt_lists_projects_with_indexes(self):
        candidates = _projects(2)
        prompt = build_prompt(_requester(), candidates, _request(sectors=("technology",)))
        assert "PROFIL INVESTISSEUR" in prompt
        assert "0. Projet 0" in prompt
        assert "1. Projet 1" in prompt
        assert "€250,000" in prompt
        assert '"sectors": ["technology"]' in prompt
        assert "candidate_index" in prompt

    def test_entrepreneur_prompt_lists_investors(self):
        candidates = [InvestorCandidate(id=uuid.uuid4(), full_name="Paul Angel", company="Angels SA")]
        prompt = build_prompt(_requester(), candidates, _request(role="entrepreneur"))
        assert "PROFIL ENTREPRENEUR" in prompt
        assert "0. Paul Angel" in prompt
        assert "Angels SA" in prompt


class TestCompatibilityScorer:
    @patch("apps.ai_engine.scoring._get_client")
    def test_score_success(self, mock_client, matching_config):
        llm = MagicMock()
        llm.chat.completions.create.return_value = make_completion({
            "matches": [
                {"candidate_index": 0, "score": 85, "reasons": ["Secteur commun", "Montant adapté"]},
                {"candidate_index": 2, "score": 55, "reasons": ["Localisation"]},
            ]
        })
        mock_client.return_value = llm

        scores = CompatibilityScorer(matching_config).score(_requester(), _projects(3), _request())

        assert set(scores) == {0, 2}
        assert scores[0].score == 85
        kwargs = llm.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o-mini"
        assert kwargs["temperature"] == 0.3
        assert kwargs["max_tokens"] == 2000
        assert kwargs["messages"][0] == {"role": "system", "content": prompts.MATCHING_SYSTEM}

    @patch("apps.ai_engine.scoring._get_client")
    def test_missing_api_key_skips_call(self, mock_client):
        scores = CompatibilityScorer(MatchingConfig(openai_api_key="")).score(
            _requester(), _projects(2), _request()
        )
        assert scores == {}
        mock_client.assert_not_called()

    @patch("apps.ai_engine.scoring._get_client")
    def test_no_candidates_skips_call(self, mock_client, matching_config):
        assert CompatibilityScorer(matching_config).score(_requester(), [], _request()) == {}
        mock_client.assert_not_called()

    @patch("apps.ai_engine.scoring._get_client")
    def test_network_failure_degrades(self, mock_client, matching_config):
        llm = MagicMock()
        llm.chat.completions.create.side_effect = openai.APIConnectionError(
            request=httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        )
        mock_client.return_value = llm

        assert CompatibilityScorer(matching_config).score(_requester(), _projects(2), _request()) == {}

    @patch("apps.ai_engine.scoring._get_client")
    def test_malformed_content_degrades(self, mock_client, matching_config):
        llm = MagicMock()
        llm.chat.completions.create.return_value = make_completion("not json at all")
        mock_client.return_value = llm

        assert CompatibilityScorer(matching_config).score(_requester(), _projects(2), _request()) == {}

    @patch("apps.ai_engine.scoring._get_client")
    def test_empty_choices_degrades(self, mock_client, matching_config):
        resp = MagicMock()
        resp.choices = []
        llm = MagicMock()
        llm.chat.completions.create.return_value = resp
        mock_client.return_value = llm

        assert CompatibilityScorer(matching_config).score(_requester(), _projects(1), _request()) == {}

    def test_client_disables_sdk_retries(self, matching_config):
        from apps.ai_engine.scoring import _get_client

        client = _get_client(matching_config)
        assert client.max_retries == 0
