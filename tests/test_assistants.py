# tests/test_assistants.py

from campus_aid.backend.app.ai import campus_assistant, responder, syllabus_content, teacher


# Campus assistant

def test_department_question_is_routed():
    answer = campus_assistant.process_query("Where is the Computer Science office?")
    assert answer.type == "routing"
    assert "COMPUTER SCIENCE" in answer.message
    assert "Submit Ticket" in answer.suggested_actions


def test_departments_win_over_facilities():
    # "library" is a department entry, "cafeteria" a facility
    answer = campus_assistant.process_query("is the library near the cafeteria")
    assert answer.type == "routing"


def test_facility_question():
    answer = campus_assistant.process_query("cafeteria timings please")
    assert answer.type == "facility"
    assert "7 AM - 9 PM" in answer.message


def test_procedure_question():
    answer = campus_assistant.process_query("How do I raise a complaint?")
    assert answer.type == "info"
    assert answer.message.startswith("**COMPLAINT Process:**")


def test_help_then_contacts_then_default():
    assert "Support Options" in campus_assistant.process_query("I need help").message

    contacts = campus_assistant.process_query("phone numbers?")
    assert "Emergency Contacts" in contacts.message
    assert contacts.suggested_actions == []

    fallback = campus_assistant.process_query("what's the weather")
    assert fallback.type == "faq"


def test_faqs():
    faqs = campus_assistant.get_faqs()
    assert len(faqs) == 4
    assert all(set(f) == {"question", "answer"} for f in faqs)


# Built-in syllabus

def test_available_subjects():
    assert syllabus_content.get_available_subjects() == [
        "Data Structures",
        "Database Management",
        "Computer Networks",
    ]


def test_search_content_hits_topics_and_chapters():
    found = syllabus_content.search_content("linked lists", "Data Structures")
    assert "Based on the Data Structures syllabus" in found
    assert "Linked Lists" in found


def test_search_content_across_subjects_and_misses():
    assert "Computer Networks" in syllabus_content.search_content("explain the osi model")
    assert syllabus_content.search_content("photosynthesis") is None
    assert syllabus_content.search_content("   ") is None


# Responder

def test_greeting_needs_a_whole_word():
    assert responder.generate_response("hi there") == responder.GREETING_REPLY
    assert responder.generate_response("this thing") == responder.DEFAULT_REPLY


def test_context_is_quoted():
    reply = responder.generate_response("explain stacks", "**Related Topics:** Stacks")
    assert "**Related Topics:** Stacks" in reply


def test_is_academic_query():
    assert responder.is_academic_query("Define a variable")
    assert not responder.is_academic_query("see you later")


# AI teacher

def test_inappropriate_topics_get_fallback():
    answer = teacher.process_query("can you give me medical advice")
    assert answer.mode == "fallback"
    assert answer.confidence == 0.5
    assert answer.suggested_questions == []


def test_academic_with_syllabus_hit():
    answer = teacher.process_query("explain database normalization")
    assert answer.mode == "academic"
    assert answer.confidence == 0.9
    assert "Normalization" in answer.message
    assert "What is database normalization?" in answer.suggested_questions


def test_academic_without_syllabus_hit_gets_tip():
    answer = teacher.process_query("define entropy in thermodynamics")
    assert answer.mode == "academic"
    assert answer.confidence == 0.6
    assert "upload the syllabus" in answer.message
    assert answer.suggested_questions == teacher.DEFAULT_RELATED


def test_conversational_and_general():
    chat = teacher.process_query("I'm so stressed this week")
    assert chat.mode == "conversational"
    assert chat.confidence == 0.9
    assert chat.message == responder.STRESS_REPLY

    general = teacher.process_query("what's for lunch")
    assert general.mode == "conversational"
    assert general.confidence == 0.8
