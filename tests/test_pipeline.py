"""Tests for the analysis pipeline."""

from unittest.mock import Mock

import pytest
from hatewatch.core.models import (
    Comment, Hate, Neutral, PostInfo, Positive, Sentiment, Severity, SpeechActType,
)
from hatewatch.core.pipeline import AnalysisPipeline
from hatewatch.services.model import ModelState, TextClassifierCapability


def comment(text, idx="1", parent_id=None):
    return Comment(id=idx, author="tester", text=text, timestamp="2024-01-01T00:00:00", parent_id=parent_id)


def loaded_model(label, score):
    model = TextClassifierCapability(
        model_name="fake",
        pipeline_factory=lambda name: (lambda text: [{"label": label, "score": score}]),
    )
    model.load()
    return model


class TestClassifyComment:
    """Per-comment rule chain."""

    def test_insult_scenario(self):
        result = AnalysisPipeline().classify_comment(comment("Dasar bodoh! Kenapa masih ada orang seperti ini"))
        assert result.sentiment is Sentiment.HATE
        assert result.category == "Penghinaan"
        assert result.confidence == 0.7
        assert result.speech_act.type is SpeechActType.EXPRESSIVE
        assert result.speech_act.subtype == "Penghinaan/Ejekan"
        assert result.violation.articles == ("27(3)",)
        assert result.source == "lexicon"

    def test_gratitude_scenario(self):
        result = AnalysisPipeline().classify_comment(
            comment("Terima kasih sudah berbagi informasi yang bermanfaat ini")
        )
        assert isinstance(result.verdict, Positive)
        assert not result.violation.has_violation

    def test_neutral_confidence_override(self):
        result = AnalysisPipeline(neutral_confidence=0.5).classify_comment(comment("Saya makan siang"))
        assert result.verdict == Neutral(0.5)


class TestModelCollaborator:
    """Local model may raise confidence when it agrees."""

    def test_agreeing_model_raises_confidence(self):
        pipeline = AnalysisPipeline(model=loaded_model("NEGATIVE", 0.95))
        result = pipeline.classify_comment(comment("Dasar bodoh"))
        assert result.sentiment is Sentiment.HATE
        assert result.confidence == 0.9
        assert result.category == "Penghinaan"
        assert result.source == "model"

    def test_disagreeing_model_is_ignored(self):
        pipeline = AnalysisPipeline(model=loaded_model("NEGATIVE", 0.99))
        result = pipeline.classify_comment(comment("Mantap sekali"))
        assert result.sentiment is Sentiment.POSITIVE
        assert result.source == "lexicon"

    def test_low_score_is_ignored(self):
        pipeline = AnalysisPipeline(model=loaded_model("NEGATIVE", 0.55))
        assert pipeline.classify_comment(comment("Dasar bodoh")).confidence == 0.7

    def test_unavailable_model_uses_rules(self):
        def broken(name):
            raise OSError("no weights")

        model = TextClassifierCapability(model_name="fake", pipeline_factory=broken)
        assert model.load() is ModelState.UNAVAILABLE

        pipeline = AnalysisPipeline(model=model)
        result = pipeline.classify_comment(comment("Dasar bodoh"))
        assert result.confidence == 0.7
        assert pipeline.analyze([comment("Dasar bodoh")]).model_state == "unavailable"


class TestGenAICollaborator:
    """Generative AI results merged field by field."""

    payload = {
        "sentiment": "hate",
        "confidence": 0.95,
        "category": "SARA",
        "iteViolationType": "blasphemy",
        "speechActType": "declarative",
        "speechActSubtype": "Deklarasi Diskriminatif",
        "uiteViolation": {
            "hasViolation": True,
            "articles": ["28(2)", "28(2)"],
            "severity": "high",
            "description": "Ujaran kebencian SARA.",
        },
    }

    def test_valid_payload_overrides_rules(self):
        genai = Mock(available=True)
        genai.analyze_comments.return_value = [self.payload]

        report = AnalysisPipeline(genai=genai).analyze([comment("orang itu beda")])
        result = report.results[0]

        assert result.verdict == Hate(confidence=0.95, category="SARA")
        assert result.ite_violation.type == "blasphemy"
        assert result.speech_act.type is SpeechActType.DECLARATIVE
        assert result.violation.articles == ("28(2)",)
        assert result.violation.severity is Severity.HIGH
        assert result.source == "genai"

    def test_invalid_fields_fall_back_to_rules(self):
        genai = Mock(available=True)
        genai.analyze_comments.return_value = [{
            "sentiment": "angry",
            "confidence": 7,
            "speechActType": "shouting",
            "iteViolationType": "bogus",
            "uiteViolation": {"articles": ["99(1)"], "severity": "high", "description": "x"},
        }]
        rule = AnalysisPipeline().classify_comment(comment("Dasar bodoh"))

        result = AnalysisPipeline(genai=genai).analyze([comment("Dasar bodoh")]).results[0]
        assert result.verdict == rule.verdict
        assert result.speech_act == rule.speech_act
        assert result.violation == rule.violation
        assert result.ite_violation == rule.ite_violation

    def test_missing_payload_keeps_rule_result(self):
        genai = Mock(available=True)
        genai.analyze_comments.return_value = [None, self.payload]

        results = AnalysisPipeline(genai=genai).analyze(
            [comment("Dasar bodoh", "1"), comment("orang itu beda", "2")]
        ).results
        assert results[0].source == "lexicon"
        assert results[1].source == "genai"

    def test_service_error_keeps_rule_results(self):
        genai = Mock(available=True)
        genai.analyze_comments.side_effect = RuntimeError("quota")

        results = AnalysisPipeline(genai=genai).analyze([comment("Dasar bodoh")]).results
        assert results[0].source == "lexicon"
        assert results[0].category == "Penghinaan"

    def test_unavailable_service_is_not_called(self):
        genai = Mock(available=False)
        AnalysisPipeline(genai=genai).analyze([comment("Dasar bodoh")])
        genai.analyze_comments.assert_not_called()

    def test_sentiment_flip_recomputes_fallback_fields(self):
        """Fields missing from the payload follow the merged hate verdict."""
        genai = Mock(available=True)
        genai.analyze_comments.return_value = [{"sentiment": "hate", "confidence": 0.9, "category": "SARA"}]

        text = "dasar orang kafir"
        assert AnalysisPipeline().classify_comment(comment(text)).violation.articles == ()

        result = AnalysisPipeline(genai=genai).analyze([comment(text)]).results[0]
        assert result.verdict == Hate(confidence=0.9, category="SARA")
        assert result.violation.articles == ("28(2)",)
        assert result.violation.severity is Severity.HIGH

    def test_sentiment_flip_updates_speech_act_subtype(self):
        genai = Mock(available=True)
        genai.analyze_comments.return_value = [{"sentiment": "hate"}]

        text = "Mereka itu bukan bagian dari kita"
        assert AnalysisPipeline().classify_comment(comment(text)).speech_act.subtype == "Pernyataan Status"

        result = AnalysisPipeline(genai=genai).analyze([comment(text)]).results[0]
        assert result.sentiment is Sentiment.HATE
        assert result.speech_act.subtype == "Deklarasi Diskriminatif"

    def test_long_form_articles_are_accepted(self):
        genai = Mock(available=True)
        genai.analyze_comments.return_value = [{
            "sentiment": "hate",
            "uiteViolation": {
                "articles": ["Pasal 28 ayat (2)", "27(3)", "pasal 45A ayat (2)"],
                "severity": "high",
                "description": "SARA dan ancaman.",
            },
        }]

        result = AnalysisPipeline(genai=genai).analyze([comment("orang itu beda")]).results[0]
        assert result.violation.articles == ("28(2)", "27(3)", "45A(2)")
        assert result.violation.description == "SARA dan ancaman."

    def test_unknown_article_keeps_rule_violation(self):
        genai = Mock(available=True)
        genai.analyze_comments.return_value = [{
            "uiteViolation": {"articles": ["Pasal 99"], "severity": "high", "description": "x"},
        }]

        result = AnalysisPipeline(genai=genai).analyze([comment("Dasar bodoh")]).results[0]
        assert result.violation.articles == ("27(3)",)


class TestAnalyze:
    """Batch analysis report."""

    def test_report(self):
        comments = [
            comment("Setuju banget dengan postingan ini! Sangat inspiratif.", "1"),
            comment("Orang-orang seperti ini memang tidak berguna dan harus dienyahkan dari masyarakat.", "2", "1"),
            comment("Terima kasih sudah berbagi informasi yang bermanfaat ini.", "3"),
            comment("Dasar bodoh! Kenapa masih ada orang seperti ini di dunia. Menyebalkan sekali!", "4"),
            comment("Artikel yang menarik, saya akan share ke teman-teman.", "5"),
        ]
        post = PostInfo(title="Demo", content="", author="a", timestamp="")
        report = AnalysisPipeline().analyze(comments, post=post)

        assert report.post is post
        assert report.statistics.total == 5
        assert report.statistics.hate == 2
        assert report.statistics.positive == 3
        assert report.statistics.hate_percentage == 40
        assert report.categories["Penghinaan"] == 1
        assert report.categories["Lainnya (Negatif)"] == 1
        assert sum(c.count for c in report.clusters) >= 1
        assert [t.result.comment.id for t in report.threads] == ["1", "3", "4", "5"]
        assert report.generated_at
        assert report.model_state == "unavailable"

    def test_dict_input_is_coerced(self):
        report = AnalysisPipeline().analyze([{"text": "bodoh"}, {"text": None, "likes": "x"}])
        assert [r.comment.id for r in report.results] == ["comment_0", "comment_1"]
        assert report.results[1].comment.text == ""
        assert report.results[1].comment.likes == 0
        assert report.statistics.hate == 1

    def test_empty_batch(self):
        report = AnalysisPipeline().analyze([])
        assert report.statistics.total == 0
        assert report.statistics.hate_percentage == 0
        assert report.clusters == []
        assert report.entities == []
        assert report.threads == []


if __name__ == "__main__":
    pytest.main([__file__])
