import subprocess
import sys
from pathlib import Path

import pytest

from factory_pattern import (
    Mailer,
    NewsLetterMailGenerator,
    NewsLetterMailTemplate,
    WelcomeMailGenerator,
    WelcomeMailTemplate,
    client_code,
)


def test_welcome_mail():
    assert WelcomeMailGenerator().send_mail() == (
        "Sending the following mail : Welcome aboard! Thanks for signing up!"
    )

def test_newsletter_mail():
    assert NewsLetterMailGenerator().send_mail() == (
        "Sending the following mail : Please enjoy our newsletter!"
    )

def test_generators_build_their_own_template():
    assert isinstance(WelcomeMailGenerator().generate_mail_template(), WelcomeMailTemplate)
    assert isinstance(NewsLetterMailGenerator().generate_mail_template(), NewsLetterMailTemplate)

def test_template_is_fresh_per_call():
    mailer = WelcomeMailGenerator()
    assert mailer.generate_mail_template() is not mailer.generate_mail_template()

def test_mailer_is_abstract():
    with pytest.raises(TypeError):
        Mailer()

def test_new_mail_kind_reuses_send_mail():
    class ReminderMailGenerator(Mailer):
        def generate_mail_template(self):
            class ReminderTemplate(WelcomeMailTemplate):
                def generate(self):
                    return "Your cart misses you"
            return ReminderTemplate()

    assert ReminderMailGenerator().send_mail() == (
        "Sending the following mail : Your cart misses you"
    )

def test_client_code_prints_mail(capsys):
    client_code(WelcomeMailGenerator())
    client_code(NewsLetterMailGenerator())
    assert capsys.readouterr().out.splitlines() == [
        "Sending the following mail : Welcome aboard! Thanks for signing up!",
        "Sending the following mail : Please enjoy our newsletter!",
    ]

def test_demo_prints_both_mails_only():
    script = Path(__file__).resolve().parent.parent / "factory_pattern.py"
    result = subprocess.run(
        [sys.executable, str(script)], capture_output=True, text=True, check=True
    )
    assert result.stdout.splitlines() == [
        "Sending the following mail : Welcome aboard! Thanks for signing up!",
        "---",
        "Sending the following mail : Please enjoy our newsletter!",
    ]
    assert result.stderr == ""
