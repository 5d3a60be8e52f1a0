from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string
from django.utils.html import strip_tags
from django.conf import settings


def send_verification_email(user, verify_url):
    subject = 'Confirm your email address'
    html_content = render_to_string(
        'users/email_verify.html',
        {"name": user.display_name, "verify_url": verify_url},
    )
    text_content = strip_tags(html_content)
    from_email = settings.EMAIL_HOST_USER

    msg = EmailMultiAlternatives(subject, text_content, from_email, [user.email])
    msg.attach_alternative(html_content, "text/html")

    msg.extra_headers = {
        "X-Mailer": "Django",
        "Reply-To": from_email,
    }

    msg.send()
