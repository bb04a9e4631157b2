"""Tests for the prompt builder."""

import pytest
from pydantic import ValidationError

from djkit.models import (
    CreativeContentType,
    EmailFollowUpType,
    EventType,
    McScriptType,
    OutputTone,
    RefinementAction,
    SocialMediaPlatform,
    TemplateType,
)
from djkit.prompts import (
    FORM_FORMATTING_INSTRUCTION,
    build_media_prompt,
    build_prompt,
    uses_web_search,
)
from djkit.schemas import (
    AgreementRequest,
    ImageGenerationParams,
    parse_generation_request,
)


def _request(**payload):
    return parse_generation_request(payload)


def test_agreement_interpolates_fields():
    """Test that agreement fields appear in the prompt."""
    prompt = build_prompt(_request(
        templateType="Service Agreement",
        eventType="Wedding",
        tone="Professional",
        djName="DJ Nova",
        clientName="Alice & Sam",
        eventDate="2026-06-12",
        venue="The Glasshouse",
        totalCost="2400",
        depositAmount="600",
    ))

    assert "DJ Nova" in prompt
    assert "Alice & Sam" in prompt
    assert "2026-06-12" in prompt
    assert "The Glasshouse" in prompt
    assert "$2400" in prompt
    assert "$600" in prompt
    assert "Wedding" in prompt
    assert "Professional" in prompt
    for section in range(1, 13):
        assert f"{section}." in prompt


def test_agreement_missing_fields_become_placeholders():
    """Test that absent or blank fields are bracketed placeholders."""
    prompt = build_prompt(AgreementRequest(client_name="   "))

    assert "[Client Name(s)]" in prompt
    assert "[DJ Name/Company]" in prompt
    assert "[Event Date]" in prompt
    assert "[Venue Name & Address]" in prompt
    assert "[Total Cost]" in prompt
    assert "[Deposit Amount]" in prompt


def test_numeric_fields_are_accepted():
    """Test that numbers on the wire are coerced to text."""
    request = _request(templateType="Deposit Terms", totalCost=2400, depositAmount=600)
    prompt = build_prompt(request)

    assert "$2400" in prompt
    assert "[Deposit Due Date]" in prompt
    assert "[List of Payment Methods]" in prompt


def test_every_prompt_ends_with_output_only_instruction():
    """Test that each template asks for the content only."""
    payloads = [
        {"templateType": t.value}
        for t in TemplateType
        if t != TemplateType.CREATIVE_CONTENT
    ] + [
        {"templateType": "Creative Content", "creativeContentType": c.value}
        for c in (
            CreativeContentType.MC_SCRIPTS,
            CreativeContentType.SOCIAL_MEDIA_POST,
            CreativeContentType.BLOG_POST,
        )
    ]

    for payload in payloads:
        prompt = build_prompt(_request(tone="Energetic & Fun", **payload))
        assert "Output only the" in prompt, payload
        assert "Energetic & Fun" in prompt, payload


def test_brand_voice_is_included_when_given():
    prompt = build_prompt(_request(
        templateType="Event Checklist",
        brandVoice="Laid-back surfer vibes",
    ))
    assert "Laid-back surfer vibes" in prompt

    without = build_prompt(_request(templateType="Event Checklist"))
    assert "brand voice" not in without


def test_form_templates_carry_form_instruction():
    """Test that checklist and questionnaires ask for question type hints."""
    for template_type in (
        "Event Checklist",
        "Pre-Event Questionnaire",
        "Post-Event Feedback & Testimonial",
    ):
        prompt = build_prompt(_request(templateType=template_type, eventType="Corporate Event"))
        assert FORM_FORMATTING_INSTRUCTION in prompt
        assert "[Linear Scale 1-5]" in prompt
        assert "Corporate Event" in prompt

    timeline = build_prompt(_request(templateType="Event Timeline Builder"))
    assert FORM_FORMATTING_INSTRUCTION not in timeline
    assert "[Start Time]" in timeline
    assert "[End Time]" in timeline


def test_referral_email_adds_referral_instruction():
    referral = build_prompt(_request(
        templateType="Email Follow-up",
        emailFollowUpType=EmailFollowUpType.REFERRAL_REQUEST.value,
        clientName="Jordan",
    ))
    thank_you = build_prompt(_request(
        templateType="Email Follow-up",
        emailFollowUpType=EmailFollowUpType.POST_EVENT.value,
    ))

    assert "request referrals" in referral
    assert "Jordan" in referral
    assert "request referrals" not in thank_you
    assert "The Knot" in thank_you
    assert "[Client Name]" in thank_you


def test_personalized_story_uses_fun_facts():
    prompt = build_prompt(_request(
        templateType="Creative Content",
        creativeContentType="Gig Assistant (MC Scripts)",
        mcScriptType=McScriptType.PERSONALIZED_STORY.value,
        clientFunFacts="Met at a karaoke bar",
    ))
    assert "Met at a karaoke bar" in prompt
    assert "Heartfelt" in prompt

    no_facts = build_prompt(_request(
        templateType="Creative Content",
        creativeContentType="Gig Assistant (MC Scripts)",
        mcScriptType=McScriptType.PERSONALIZED_STORY.value,
    ))
    assert "[No facts provided]" in no_facts


def test_mc_script_names_event_moment():
    prompt = build_prompt(_request(
        templateType="Creative Content",
        creativeContentType="Gig Assistant (MC Scripts)",
        mcScriptType=McScriptType.LAST_CALL.value,
    ))
    assert "Last Call / Wind Down" in prompt
    assert "--- OPTION 1" in prompt


def test_social_media_post_names_platform():
    prompt = build_prompt(_request(
        templateType="Creative Content",
        creativeContentType="Social Media Post",
        socialMediaPlatform=SocialMediaPlatform.TWITTER_X.value,
    ))
    assert "Platform: Twitter / X" in prompt
    assert "[A recap of a great event]" in prompt


def test_playlist_format_and_title():
    prompt = build_prompt(_request(
        templateType="Music Planning & Playlists",
        playlistType="Cocktail Hour",
        clientName="Priya",
    ))
    assert "20-30" in prompt
    assert '"Artist - Song Title"' in prompt
    assert "### Cocktail Hour Suggestions for Priya" in prompt
    assert "[DJ's Choice]" in prompt
    assert prompt.count("[None specified]") == 2


def test_sales_assistant_quotes_objection():
    prompt = build_prompt(_request(
        templateType="Sales Assistant (Objection Handling)",
        salesObjectionType="Why not just use a Spotify playlist?",
    ))
    assert "Why not just use a Spotify playlist?" in prompt
    assert "[Your Price]" in prompt


def test_refinement_only_uses_action_and_original_text():
    """Test that refinement ignores the category fields."""
    prompt = build_prompt(_request(
        templateType="Service Agreement",
        clientName="Should Not Appear",
        isRefinement=True,
        refinementAction=RefinementAction.SHORTER.value,
        originalText="A long agreement text.",
    ))

    assert "Make it shorter" in prompt
    assert "A long agreement text." in prompt
    assert "Should Not Appear" not in prompt
    assert "only the refined text" in prompt


def test_refinement_prompt_ignores_template_type():
    refine = {
        "isRefinement": True,
        "refinementAction": RefinementAction.MORE_PROFESSIONAL.value,
        "originalText": "Hey folks, see you Saturday!",
    }
    agreement = _request(templateType="Service Agreement", clientName="Alice", **refine)
    playlist = _request(
        templateType="Music Planning & Playlists",
        genreVibe="Motown",
        mustPlaySongs="September",
        **refine,
    )

    assert build_prompt(agreement) == build_prompt(playlist)


def test_media_refinement_needs_no_prompt():
    """Test that image and video refinements validate without a description."""
    for content_type in ("AI Image for Social Media", "AI Video for Social Media"):
        request = _request(
            templateType="Creative Content",
            creativeContentType=content_type,
            isRefinement=True,
            refinementAction=RefinementAction.SHORTER.value,
            originalText="A neon-lit DJ booth at dusk.",
        )
        prompt = build_prompt(request)
        assert "Make it shorter" in prompt
        assert "A neon-lit DJ booth at dusk." in prompt


def test_media_request_requires_prompt():
    with pytest.raises(ValidationError, match="describe the image or video"):
        _request(templateType="Creative Content", creativeContentType="AI Image for Social Media")

    with pytest.raises(ValidationError):
        _request(
            templateType="Creative Content",
            creativeContentType="AI Video for Social Media",
            prompt="   ",
        )


def test_refinement_requires_action_and_text():
    with pytest.raises(ValidationError):
        _request(templateType="Service Agreement", isRefinement=True, originalText="x")

    with pytest.raises(ValidationError):
        _request(
            templateType="Service Agreement",
            isRefinement=True,
            refinementAction=RefinementAction.MORE_CASUAL.value,
        )


def test_unknown_template_type_is_rejected():
    with pytest.raises(ValidationError):
        _request(templateType="Horoscope")


def test_prompt_is_deterministic():
    payload = {"templateType": "Service Agreement", "clientName": "Lee"}
    assert build_prompt(_request(**payload)) == build_prompt(_request(**payload))


def test_uses_web_search_only_for_blog_posts():
    blog = _request(templateType="Creative Content", creativeContentType="Blog Post for Website/SEO")
    social = _request(templateType="Creative Content", creativeContentType="Social Media Post")
    agreement = _request(templateType="Service Agreement")

    assert uses_web_search(blog) is True
    assert uses_web_search(social) is False
    assert uses_web_search(agreement) is False


def test_blog_post_refinement_uses_web_search():
    refinement = _request(
        templateType="Creative Content",
        creativeContentType="Blog Post for Website/SEO",
        isRefinement=True,
        refinementAction=RefinementAction.MORE_CASUAL.value,
        originalText="Ten tips for choosing a wedding DJ.",
    )
    assert uses_web_search(refinement) is True


def test_media_prompt_is_users_text():
    request = _request(
        templateType="Creative Content",
        creativeContentType="AI Image for Social Media",
        prompt="  Neon DJ booth  ",
        eventType=EventType.PRIVATE_PARTY.value,
        tone=OutputTone.CONCISE.value,
    )
    assert build_prompt(request) == "Neon DJ booth"
    assert build_media_prompt(ImageGenerationParams(prompt=" Sunset set ")) == "Sunset set"
