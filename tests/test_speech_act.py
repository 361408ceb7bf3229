"""Tests for speech-act classification."""

import pytest
from hatewatch.core.models import SpeechAct, SpeechActType
from hatewatch.core.speech_act import classify_speech_act, is_aggressive


class TestSpeechAct:
    """First matching family wins."""

    def test_directive(self):
        act = classify_speech_act("Tolong bantu saya", is_hate=False)
        assert act == SpeechAct(SpeechActType.DIRECTIVE, "Perintah/Permintaan")

    def test_violent_directive_requires_hate(self):
        text = "Bunuh saja mereka, harus!"
        assert classify_speech_act(text, is_hate=True).subtype == "Ancaman/Perintah Kasar"
        assert classify_speech_act(text, is_hate=False).subtype == "Perintah/Permintaan"

    def test_commissive(self):
        act = classify_speech_act("Saya akan datang besok", is_hate=False)
        assert act == SpeechAct(SpeechActType.COMMISSIVE, "Janji/Komitmen")

    @pytest.mark.parametrize("text", ["Saya menjamin besok selesai", "dijamin aman"])
    def test_jamin_verbs_are_commissive(self, text):
        assert classify_speech_act(text, is_hate=False) == SpeechAct(SpeechActType.COMMISSIVE, "Janji/Komitmen")

    def test_jaminan_noun_is_not_a_promise(self):
        assert classify_speech_act("jaminan kesehatan", is_hate=False).type is SpeechActType.ASSERTIVE

    def test_revenge(self):
        act = classify_speech_act("Aku pasti balas dendam", is_hate=True)
        assert act == SpeechAct(SpeechActType.COMMISSIVE, "Janji Balas Dendam")

    def test_expressive_insult(self):
        act = classify_speech_act("Dasar bodoh! Kenapa masih ada orang seperti ini", is_hate=True)
        assert act == SpeechAct(SpeechActType.EXPRESSIVE, "Penghinaan/Ejekan")

    def test_expressive_feeling(self):
        act = classify_speech_act("Senang sekali hari ini", is_hate=False)
        assert act == SpeechAct(SpeechActType.EXPRESSIVE, "Ekspresi Perasaan")

    def test_declarative(self):
        act = classify_speech_act("Dia adalah ketua kelas", is_hate=False)
        assert act == SpeechAct(SpeechActType.DECLARATIVE, "Pernyataan Status")

    def test_discriminatory_declaration(self):
        act = classify_speech_act("Mereka itu bukan bagian dari kita", is_hate=True)
        assert act == SpeechAct(SpeechActType.DECLARATIVE, "Deklarasi Diskriminatif")

    def test_accusation(self):
        text = "Dia menyebar berita bohong"
        assert classify_speech_act(text, is_hate=True).subtype == "Tuduhan/Fitnah"
        assert classify_speech_act(text, is_hate=False).subtype == "Pernyataan Fakta/Pendapat"

    def test_keluarga_is_not_a_command(self):
        act = classify_speech_act("Keluarga saya sehat", is_hate=False)
        assert act.type is SpeechActType.ASSERTIVE

    def test_malformed_input_is_assertive(self):
        assert classify_speech_act(None, is_hate=False).type is SpeechActType.ASSERTIVE


def test_is_aggressive():
    assert is_aggressive(SpeechAct(SpeechActType.EXPRESSIVE, "Penghinaan/Ejekan"))
    assert is_aggressive(SpeechAct(SpeechActType.COMMISSIVE, "Janji Balas Dendam"))
    assert not is_aggressive(SpeechAct(SpeechActType.DIRECTIVE, "Perintah/Permintaan"))


if __name__ == "__main__":
    pytest.main([__file__])
