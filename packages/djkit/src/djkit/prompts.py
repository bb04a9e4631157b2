"""
Prompt builder

Turns a validated generation request into the single prompt string sent to
the language model. Pure and deterministic: no I/O, no randomness.

Every template:
- interpolates the request's fields, substituting a bracketed placeholder
  (e.g. "[Client Name]") for anything missing so the output stays usable
- spells out the structure the model must follow
- ends by asking for the content only, with no commentary
"""

from typing import Callable, Dict, Optional

from .models import (
    CreativeContentType,
    EmailFollowUpType,
    McScriptType,
    TemplateType,
)
from .schemas import (
    AgreementRequest,
    BlogPostRequest,
    DepositTermsRequest,
    EmailFollowUpRequest,
    EventTimelineRequest,
    GenerationRequest,
    McScriptRequest,
    MusicPlaylistRequest,
    SalesAssistantRequest,
    SocialMediaPostRequest,
)


OUTPUT_ONLY_INSTRUCTION = (
    "Output only the {what}. Do not add any extra commentary before or after it."
)

BASE_INSTRUCTION = (
    "You are a world-class business consultant for professional DJs. Your task is to "
    "generate a well-structured, professional, and clear document. The tone should be "
    "{tone}. The output should be plain text, ready to be copied.{brand_voice}"
)

FORM_FORMATTING_INSTRUCTION = (
    "IMPORTANT: Structure the output for easy conversion into a Google Form. For each "
    "question or checklist item, specify the suggested question type in brackets, like "
    "[Short Answer], [Paragraph], [Multiple Choice], [Checkboxes], or [Linear Scale 1-5]. "
    "Start each item on a new line."
)

REFINEMENT_TEMPLATE = """You are an expert text editor for a professional DJ. Your task is to refine the following text.

Refinement instruction: "{action}"

Original Text:
---
{original_text}
---

Apply only this one change and keep the original meaning intact.
Produce only the refined text as the output. Do not add any extra commentary."""

AGREEMENT_TEMPLATE = """{base}

Generate a comprehensive DJ service agreement for a {event_type}.

Details:
- Parties Involved: {dj_name} (Hereinafter "DJ") and {client_name} (Hereinafter "Client").
- Event Type: {event_type}
- Event Date: {event_date}
- Venue: {venue}
- Service Period: [Specify Start and End Times, e.g., 6:00 PM to 11:00 PM]
- Total Fee: ${total_cost}
- Deposit: ${deposit_amount} required to secure the date.
- Final Balance Due: [Specify Date, e.g., 14 days prior to the event]

The agreement must include the following sections, clearly titled:
1.  **Parties**: Defines the DJ and Client.
2.  **Event Details**: Summarizes date, time, and location.
3.  **Services Provided**: Details the DJ/MC services, equipment provided (sound system, microphones, basic lighting).
4.  **Payment Schedule**: Outlines total fee, deposit amount and due date, and final balance due date.
5.  **Cancellation Policy**: Clear terms for cancellation by either the Client or the DJ.
6.  **Overtime**: Specifies the hourly rate for services extending beyond the agreed time.
7.  **DJ Requirements**: Client's responsibility to provide adequate power, a safe working environment, and protection from elements if outdoors.
8.  **Music & Planning**: Mentions the process for music requests and planning.
9.  **Liability & Indemnification**: Standard limitation of liability clause.
10. **Model Release**: A clause allowing the DJ to use photos/videos from the event for promotional purposes (optional, but good to include).
11. **Entire Agreement**: Standard clause stating this document is the entire agreement.
12. **Signatures**: Lines for both DJ and Client signatures and dates.

{output_only}"""

DEPOSIT_TERMS_TEMPLATE = """{base}

Generate a clear and concise "Deposit and Payment Terms" document. This is often sent with an invoice or included in an agreement.

Details:
- Event Type: {event_type}
- Total Cost: ${total_cost}
- Deposit Amount: ${deposit_amount}
- Deposit Due Date: {deposit_due_date}
- Accepted Payment Methods: {payment_methods}

The document should clearly state:
- The purpose of the deposit is to secure the event date, making it non-refundable.
- The deposit amount and due date.
- The remaining balance and its due date (e.g., 14 days before the event).
- How payments can be made.
- What happens if a payment is late.

{output_only}"""

EMAIL_FOLLOW_UP_TEMPLATE = """{base}

Generate a professional email template for a DJ.

Email Type: {email_type} for a {event_type}.

Details:
- DJ Name: {dj_name}
- Client Name: {client_name}
- Event Date: {event_date}
{purpose}
Based on the email type, write a suitable email. For a review request, include placeholders for links to review sites like The Knot, WeddingWire, or Google.

{output_only}"""

REFERRAL_PURPOSE = (
    "\nThe purpose of this email is to politely request referrals from a happy client a "
    "week or two after their event. Mention how much you enjoyed their event. Briefly "
    "explain that your business grows through word-of-mouth. You can optionally include "
    "a small incentive for a successful referral.\n"
)

PERSONALIZED_STORY_TEMPLATE = """You are a charismatic and professional event MC and storyteller, acting as an assistant for another DJ.

Your task is to generate 3 distinct, short, and engaging stories or introductions that a DJ can use live at an event. These stories should be based on the personal facts provided about the client(s). The goal is to create a warm, memorable, and personalized moment.

Event Type: {event_type}
Client(s) Name: {client_name}
DJ Name: {dj_name}

Client Fun Facts (use these to build the story):
---
{client_fun_facts}
---

Instructions:
- Create three versions, each with a different emotional angle.
- Version 1 should be **Heartfelt & Sweet**.
- Version 2 should be **Funny & High-Energy**.
- Version 3 should be **Cool & Charming**.
- Clearly label each version (e.g., "--- OPTION 1: Heartfelt ---").
- Keep each script concise (30-60 seconds when spoken) and easy to deliver.
- The tone should be {tone}.{brand_voice}
- End each script with a clear call to action (e.g., "...Let's hear it for them!", "...let's get them on the dance floor!").
- {output_only}"""

MC_SCRIPT_TEMPLATE = """You are a charismatic and experienced professional event MC, acting as an assistant for another DJ.

Your task is to generate 3 distinct script options for a DJ to say during a {event_type}.

Event Moment: {mc_script_type}
Client(s) Name: {client_name}
DJ Name: {dj_name}

Instructions:
- Create three versions, each with a slightly different personality.
- Version 1 should be **High-Energy & Fun**.
- Version 2 should be **Cool, Confident & Modern**.
- Version 3 should be **Warm, Elegant & Formal**.
- Clearly label each version (e.g., "--- OPTION 1: High-Energy ---").
- Keep each script concise, typically 30-60 seconds when spoken.
- Use placeholders like [Song Name] or [Next Event Item] where appropriate.
- The overall tone should be {tone}.{brand_voice}
- {output_only}"""

SOCIAL_MEDIA_POST_TEMPLATE = """You are a social media marketing expert specializing in the events industry, specifically for DJs.

Your task is to write a compelling social media post for {dj_name}.

Platform: {platform}
Event Type: {event_type}
Post Goal/Topic: "{post_topic}"

Instructions:
- Write in a tone that is {tone}.{brand_voice}
- Tailor the post to the specific platform.
- For **Instagram**, focus on an engaging caption that tells a story or asks a question. Provide a block of 5-10 relevant, popular hashtags.
- For **Facebook**, write a slightly longer, more conversational post. Encourage comments and sharing.
- For **Twitter / X**, keep it concise and punchy. Use 2-3 key hashtags.
- The post should be ready to copy and paste. {output_only}"""

BLOG_POST_TEMPLATE = """You are a social media and SEO marketing expert for DJs. Your task is to write an engaging, helpful, and SEO-friendly blog post based on the following topic.

Blog Post Topic: "{post_topic}"
Target Audience: Potential clients planning events (weddings, corporate parties, etc.), with a focus on the {event_type} market.

Instructions:
- The tone should be {tone}.{brand_voice}
- The article should be well-structured with a clear title, an introduction, several sub-headings (using markdown like '### Subheading'), and a conclusion.
- The content must be accurate, informative, and up-to-date.
- Naturally include keywords related to the topic.
- End with a call-to-action encouraging readers to contact {dj_name} for their next event.
- {output_only}"""

MUSIC_PLAYLIST_TEMPLATE = """You are an expert DJ and music curator with deep knowledge across all genres and decades. Your task is to generate a list of song suggestions for a client's event.

Event Type: {event_type}
Client: {client_name}
Playlist for: {playlist_type}

Desired Genre / Vibe:
"{genre_vibe}"

Client's Must-Play Songs (incorporate these and similar vibes):
---
{must_play_songs}
---

Client's Do-Not-Play List (strictly avoid these artists/songs):
---
{do_not_play_songs}
---

Instructions:
- Generate a list of 20-30 song suggestions that fit the client's request.
- Format the output as a numbered list with "Artist - Song Title".
- The suggestions should be thoughtful and create a cohesive flow for the specified part of the event.
- Ensure your suggestions are appropriate for a {event_type}.
- Do not include any songs or artists from the Do-Not-Play list.
- Keep the wording {tone}.{brand_voice}
- Begin the output with a clear title, like "### {playlist_type} Suggestions for {client_name}".
- {output_only}"""

SALES_ASSISTANT_TEMPLATE = """You are an expert sales coach and copywriter for professional DJs. Your task is to generate 2-3 distinct, professional, and persuasive email/message responses to a common client objection. The goal is to overcome the objection by highlighting value, building trust, and gently guiding the potential client toward booking.

Client Objection: "{objection}"

Event Type: {event_type}
DJ Name: {dj_name}
Client Name: {client_name}
Your Quoted Price: ${total_cost}

Instructions:
- Create 2-3 distinct versions, each with a different strategic approach.
- Version 1 should focus on **Value & Experience**. Explain what the client is getting for the price beyond just "playing music" (e.g., MCing, planning, professional equipment, peace of mind).
- Version 2 should be **Empathetic & Solution-Oriented**. Acknowledge their concern and see if there are ways to adjust the package or payment plan without devaluing your service.
- Version 3 can be **Short, Confident & Direct**, for when you want to firmly but politely hold your ground.
- Clearly label each version (e.g., "--- OPTION 1: The Value-Driven Approach ---").
- The tone should be {tone}, but always professional and helpful.{brand_voice}
- Use placeholders where appropriate.
- {output_only}"""

EVENT_CHECKLIST_TEMPLATE = """{base}

Generate a comprehensive, customizable planning checklist template for a DJ preparing for a {event_type}. The checklist should be organized by timeline (e.g., "Upon Booking", "3 Months Out", "1 Month Out", "Week Of Event", "Day Of Event"). It should be easy for a DJ to copy this template and modify it for their specific needs.

Topics to cover include: Client Communication, Music Curation, Equipment Prep, Venue Logistics, Timeline Finalization, and Post-Event Tasks.

{form_formatting}

{output_only}"""

PRE_EVENT_QUESTIONNAIRE_TEMPLATE = """{base}

Generate a detailed pre-event client questionnaire for a {event_type}. The goal is to gather all necessary information to ensure the event is a success. Organize the questions into logical sections.

For a **Wedding**, sections should include: Couple's Info, Key Contacts, Ceremony, Cocktail/Dinner Music, Formalities (dances, toasts), Music Vibe (must plays/do not plays), and special announcements.

For a **Corporate Event** or **Private Party**, sections should include: Client Info, Venue Logistics, Event Timeline, Audience Demographics, Desired Atmosphere, and Technical Needs.

{form_formatting}

{output_only}"""

POST_EVENT_QUESTIONNAIRE_TEMPLATE = """{base}

Generate a professional post-event feedback questionnaire for a client after their {event_type}. The goal is to gather constructive feedback and request a testimonial.

The questionnaire should include sections for: Overall Experience, Music Selection, Professionalism/MCing, and Planning Process. Include an open-ended question asking for a testimonial and another for suggestions for improvement.

{form_formatting}

{output_only}"""

EVENT_TIMELINE_TEMPLATE = """{base}

Generate a detailed, customizable event timeline template for a {event_type}. This timeline will serve as a foundational schedule for the DJ to coordinate with the client and other vendors.

Details:
- Event Type: {event_type}
- Client: {client_name}
- Date: {event_date}
- Service Start Time: {event_start_time}
- Service End Time: {event_end_time}

The timeline should be structured with time slots and corresponding activities. It must include key moments typical for a {event_type}. For a wedding, this includes ceremony, cocktail hour, grand entrance, dinner, toasts, first dance, parent dances, open dancing, cake cutting, and last dance. For a corporate event, this includes guest arrival, opening remarks, dinner/cocktails, presentations/awards, and open networking/dancing.

Present it in a clean, easy-to-read format with suggested timings based on the start and end times. Use placeholders like "[Time]" for easy editing.

{output_only}"""


def _field(value: Optional[str], placeholder: str) -> str:
    """Return the stripped value, or the placeholder when missing or blank."""
    if value is None:
        return placeholder
    value = value.strip()
    return value or placeholder


def _brand_voice(request) -> str:
    voice = (request.brand_voice or "").strip()
    if not voice:
        return ""
    return f" Adapt your writing style to match the DJ's brand voice: \"{voice}\"."


def _output_only(what: str) -> str:
    return OUTPUT_ONLY_INSTRUCTION.format(what=what)


def _base(request) -> str:
    return BASE_INSTRUCTION.format(tone=request.tone.value, brand_voice=_brand_voice(request))


def build_refinement_prompt(action: str, original_text: str) -> str:
    """Prompt asking the model to apply one edit to previously generated text."""
    return REFINEMENT_TEMPLATE.format(action=action, original_text=original_text)


def _agreement(request: AgreementRequest) -> str:
    return AGREEMENT_TEMPLATE.format(
        base=_base(request),
        event_type=request.event_type.value,
        dj_name=_field(request.dj_name, "[DJ Name/Company]"),
        client_name=_field(request.client_name, "[Client Name(s)]"),
        event_date=_field(request.event_date, "[Event Date]"),
        venue=_field(request.venue, "[Venue Name & Address]"),
        total_cost=_field(request.total_cost, "[Total Cost]"),
        deposit_amount=_field(request.deposit_amount, "[Deposit Amount]"),
        output_only=_output_only("agreement text"),
    )


def _deposit_terms(request: DepositTermsRequest) -> str:
    return DEPOSIT_TERMS_TEMPLATE.format(
        base=_base(request),
        event_type=request.event_type.value,
        total_cost=_field(request.total_cost, "[Total Cost]"),
        deposit_amount=_field(request.deposit_amount, "[Deposit Amount]"),
        deposit_due_date=_field(request.deposit_due_date, "[Deposit Due Date]"),
        payment_methods=_field(request.payment_methods, "[List of Payment Methods]"),
        output_only=_output_only("terms document"),
    )


def _email_follow_up(request: EmailFollowUpRequest) -> str:
    purpose = ""
    if request.email_follow_up_type == EmailFollowUpType.REFERRAL_REQUEST:
        purpose = REFERRAL_PURPOSE
    return EMAIL_FOLLOW_UP_TEMPLATE.format(
        base=_base(request),
        email_type=request.email_follow_up_type.value,
        event_type=request.event_type.value,
        dj_name=_field(request.dj_name, "[DJ Name]"),
        client_name=_field(request.client_name, "[Client Name]"),
        event_date=_field(request.event_date, "[Event Date]"),
        purpose=purpose,
        output_only=_output_only("email, starting with its subject line"),
    )


def _mc_script(request: McScriptRequest) -> str:
    fields = dict(
        event_type=request.event_type.value,
        client_name=_field(request.client_name, "[Client Name(s)]"),
        dj_name=_field(request.dj_name, "[DJ Name]"),
        tone=request.tone.value,
        brand_voice=_brand_voice(request),
        output_only=_output_only("labelled scripts"),
    )
    if request.mc_script_type == McScriptType.PERSONALIZED_STORY:
        return PERSONALIZED_STORY_TEMPLATE.format(
            client_fun_facts=_field(request.client_fun_facts, "[No facts provided]"),
            **fields,
        )
    return MC_SCRIPT_TEMPLATE.format(mc_script_type=request.mc_script_type.value, **fields)


def _social_media_post(request: SocialMediaPostRequest) -> str:
    return SOCIAL_MEDIA_POST_TEMPLATE.format(
        dj_name=_field(request.dj_name, "[DJ Name]"),
        platform=request.social_media_platform.value,
        event_type=request.event_type.value,
        post_topic=_field(request.post_topic, "[A recap of a great event]"),
        tone=request.tone.value,
        brand_voice=_brand_voice(request),
        output_only=_output_only("post"),
    )


def _blog_post(request: BlogPostRequest) -> str:
    return BLOG_POST_TEMPLATE.format(
        post_topic=_field(request.post_topic, "[A Guide to Wedding Music Planning]"),
        event_type=request.event_type.value,
        dj_name=_field(request.dj_name, "[Your Name/Company]"),
        tone=request.tone.value,
        brand_voice=_brand_voice(request),
        output_only=_output_only("blog post content, starting with its title"),
    )


def _media(request) -> str:
    return request.prompt.strip()


def _music_playlist(request: MusicPlaylistRequest) -> str:
    return MUSIC_PLAYLIST_TEMPLATE.format(
        event_type=request.event_type.value,
        client_name=_field(request.client_name, "[Client Name]"),
        playlist_type=request.playlist_type.value,
        genre_vibe=_field(request.genre_vibe, "[DJ's Choice]"),
        must_play_songs=_field(request.must_play_songs, "[None specified]"),
        do_not_play_songs=_field(request.do_not_play_songs, "[None specified]"),
        tone=request.tone.value,
        brand_voice=_brand_voice(request),
        output_only=_output_only("titled list"),
    )


def _sales_assistant(request: SalesAssistantRequest) -> str:
    return SALES_ASSISTANT_TEMPLATE.format(
        objection=request.sales_objection_type.value,
        event_type=request.event_type.value,
        dj_name=_field(request.dj_name, "[Your Name/Company]"),
        client_name=_field(request.client_name, "[Client Name]"),
        total_cost=_field(request.total_cost, "[Your Price]"),
        tone=request.tone.value,
        brand_voice=_brand_voice(request),
        output_only=_output_only("labelled responses"),
    )


def _form_template(template: str):
    def build(request) -> str:
        return template.format(
            base=_base(request),
            event_type=request.event_type.value,
            form_formatting=FORM_FORMATTING_INSTRUCTION,
            output_only=_output_only("template"),
        )
    return build


def _event_timeline(request: EventTimelineRequest) -> str:
    return EVENT_TIMELINE_TEMPLATE.format(
        base=_base(request),
        event_type=request.event_type.value,
        client_name=_field(request.client_name, "[Client Name]"),
        event_date=_field(request.event_date, "[Event Date]"),
        event_start_time=_field(request.event_start_time, "[Start Time]"),
        event_end_time=_field(request.event_end_time, "[End Time]"),
        output_only=_output_only("timeline"),
    )


_CREATIVE_BUILDERS: Dict[str, Callable] = {
    CreativeContentType.MC_SCRIPTS.value: _mc_script,
    CreativeContentType.SOCIAL_MEDIA_POST.value: _social_media_post,
    CreativeContentType.BLOG_POST.value: _blog_post,
    CreativeContentType.AI_IMAGE.value: _media,
    CreativeContentType.AI_VIDEO.value: _media,
}


def _creative_content(request) -> str:
    return _CREATIVE_BUILDERS[request.creative_content_type](request)


_BUILDERS: Dict[str, Callable] = {
    TemplateType.AGREEMENT.value: _agreement,
    TemplateType.DEPOSIT_TERMS.value: _deposit_terms,
    TemplateType.EMAIL_FOLLOW_UP.value: _email_follow_up,
    TemplateType.CREATIVE_CONTENT.value: _creative_content,
    TemplateType.MUSIC_PLAYLISTS.value: _music_playlist,
    TemplateType.SALES_ASSISTANT.value: _sales_assistant,
    TemplateType.EVENT_CHECKLIST.value: _form_template(EVENT_CHECKLIST_TEMPLATE),
    TemplateType.PRE_EVENT_QUESTIONNAIRE.value: _form_template(PRE_EVENT_QUESTIONNAIRE_TEMPLATE),
    TemplateType.POST_EVENT_QUESTIONNAIRE.value: _form_template(POST_EVENT_QUESTIONNAIRE_TEMPLATE),
    TemplateType.EVENT_TIMELINE.value: _event_timeline,
}


def build_prompt(request: GenerationRequest) -> str:
    """
    Build the language-model prompt for a generation request

    Args:
        request: Any validated GenerationRequest variant

    Returns:
        The prompt text. Refinements only use the refinement action and the
        original text; every other field is ignored.
    """
    if request.is_refinement:
        return build_refinement_prompt(request.refinement_action.value, request.original_text)

    return _BUILDERS[request.template_type](request)


def uses_web_search(request: GenerationRequest) -> bool:
    """Blog posts are generated with web search grounding enabled."""
    return (
        request.template_type == TemplateType.CREATIVE_CONTENT
        and request.creative_content_type == CreativeContentType.BLOG_POST
    )


def build_media_prompt(params) -> str:
    """Prompt for image or video generation: the user's description, trimmed."""
    return params.prompt.strip()


__all__ = [
    "build_prompt",
    "build_refinement_prompt",
    "build_media_prompt",
    "uses_web_search",
    "FORM_FORMATTING_INSTRUCTION",
]
