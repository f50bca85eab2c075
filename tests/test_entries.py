import pytest

from resume2data.entries import (
    bullet_text,
    extract_achievements,
    find_date_range,
    find_location,
    parse_education,
    parse_experience,
    parse_project,
    split_education,
    split_experience,
    split_projects,
)


# ───────────────────────── helpers ──
@pytest.mark.parametrize("line, expected", [
    ("- Shipped 3 major releases", "Shipped 3 major releases"),
    ("• Led a team of five", "Led a team of five"),
    ("* Cut build times in half", "Cut build times in half"),
    ("2. Automated the release process", "Automated the release process"),
    ("Jan 2020 - Present", None),
    ("2016 - 2020", None),
    ("Acme Corp", None),
])
def test_bullet_text(line, expected):
    assert bullet_text(line) == expected


def test_short_bullets_dropped_and_placeholder_kept():
    assert extract_achievements(["- ok", "- Migrated billing to Stripe"]) == ["Migrated billing to Stripe"]
    assert extract_achievements(["No bullets here", "- tiny"]) == [""]


@pytest.mark.parametrize("text, expected", [
    ("Jan 2020 - Present", ("Jan 2020", "Present")),
    ("September 2018 – March 2021", ("September 2018", "March 2021")),
    ("03/2019 to 11/2022", ("03/2019", "11/2022")),
    ("2016 - 2020", ("2016", "2020")),
    ("2021 - Ongoing", ("2021", "Ongoing")),
    ("no dates at all", ("", "")),
])
def test_find_date_range(text, expected):
    assert find_date_range(text) == expected


def test_find_location_prefers_region_code():
    assert find_location("Acme Corp, Austin, TX") == "Austin, TX"
    assert find_location("Based in London, United Kingdom") == "London, United Kingdom"
    assert find_location("no location here") == ""


def test_find_location_skips_section_headers():
    assert find_location("Skills, Tools") == ""


def test_find_location_takes_earliest_match_of_either_shape():
    text = "Jane Doe\nLondon, United Kingdom\nEngineer at Acme, NY office"
    assert find_location(text) == "London, United Kingdom"


# ───────────────────────── experience ──
def test_experience_title_then_company():
    exp = parse_experience("Software Engineer\nAcme Corp\nJan 2020 - Present\n- Shipped 3 major releases")
    assert exp.position == "Software Engineer"
    assert exp.company == "Acme Corp"
    assert (exp.start_date, exp.end_date) == ("Jan 2020", "Present")
    assert exp.achievements == ["Shipped 3 major releases"]
    assert exp.description == ""


def test_experience_position_at_company():
    exp = parse_experience(
        "Senior Engineer at Globex\nMar 2018 - Dec 2021\nSpringfield, OR\n"
        "- Led the migration to Kubernetes\n- Mentored four junior engineers"
    )
    assert (exp.position, exp.company) == ("Senior Engineer", "Globex")
    assert (exp.start_date, exp.end_date) == ("Mar 2018", "Dec 2021")
    assert exp.location == "Springfield, OR"
    assert exp.achievements == ["Led the migration to Kubernetes", "Mentored four junior engineers"]


def test_experience_location_line_beats_region_code_in_bullets():
    exp = parse_experience(
        "Senior Engineer at Globex\nMar 2018 - Dec 2021\nBerlin, Germany\n"
        "- Moved deploys to Docker, CI and Kubernetes"
    )
    assert exp.location == "Berlin, Germany"
    assert exp.description == ""


def test_experience_employer_first_when_dated_second_line():
    exp = parse_experience("Initech LLC\n2015 - 2018\nQA Analyst\n- Wrote test plans for every release")
    assert exp.company == "Initech LLC"
    assert exp.position == "QA Analyst"
    assert (exp.start_date, exp.end_date) == ("2015", "2018")


def test_experience_title_first_when_dated_second_line():
    exp = parse_experience("Data Engineer\n2019 - 2021\nUmbrella Corp.\n- Built the nightly ETL jobs")
    assert exp.position == "Data Engineer"
    assert exp.company == "Umbrella Corp."


def test_experience_description_and_placeholder():
    exp = parse_experience("Developer\nFoo Inc\n2018 - 2020\nWorked on the billing platform.")
    assert exp.description == "Worked on the billing platform."
    assert exp.achievements == [""]
    assert exp.end_date == "2020"


def test_experience_without_dates_defaults_to_present():
    exp = parse_experience("Intern\nHooli")
    assert exp.end_date == "Present"
    assert exp.start_date == ""


def test_single_line_entry_stays_empty():
    exp = parse_experience("Just one line")
    assert exp.company == exp.position == ""
    assert exp.achievements == [""]


def test_split_experience_on_header_pairs():
    section = (
        "Software Engineer\nAcme Corp\nJan 2020 - Present\n"
        "- Shipped three major releases to production\n"
        "Data Analyst\nGlobex Inc\nJun 2017 - Dec 2019\n"
        "- Built dashboards for the sales team"
    )
    chunks = split_experience(section)
    assert len(chunks) == 2
    assert chunks[1].startswith("Data Analyst")


def test_split_experience_on_blank_lines():
    section = "Engineer\nAcme\n2019 - 2020\n\nAnalyst\nGlobex\n2017 - 2019"
    chunks = split_experience(section)
    assert [c.split("\n")[0] for c in chunks] == ["Engineer", "Analyst"]


def test_split_experience_on_date_ranges():
    section = ("Backend engineering on the payments platform 2019 - 2021 "
               "and before that frontend work for the web shop 2016 - 2019 as a contractor")
    chunks = split_experience(section)
    assert len(chunks) == 2
    assert chunks[0].startswith("Backend engineering")
    assert chunks[1].startswith("2016 - 2019")


# ───────────────────────── education ──
def test_education_degree_first():
    edu = parse_education("B.S. Computer Science\nState University\n2016 - 2020")
    assert "B.S." in edu.degree
    assert edu.institution == "State University"
    assert (edu.start_date, edu.end_date) == ("2016", "2020")


def test_education_institution_first_with_field():
    edu = parse_education(
        "Massachusetts Institute of Technology\nMaster of Science in Computer Science\nClass of 2019"
    )
    assert edu.institution == "Massachusetts Institute of Technology"
    assert edu.degree == "Master of Science in Computer Science"
    assert edu.field == "Computer Science"
    assert (edu.start_date, edu.end_date) == ("", "2019")


def test_education_inline_institution_and_graduation_year():
    edu = parse_education("Bachelor of Arts in History from Oberlin College\nGraduated 2012")
    assert edu.degree == "Bachelor of Arts in History"
    assert edu.field == "History"
    assert edu.institution == "Oberlin College"
    assert edu.end_date == "2012"


def test_education_location_and_description():
    edu = parse_education("State University\nB.A. Economics\nBoston, MA\n2010 - 2014\nMinor in Statistics")
    assert edu.location == "Boston, MA"
    assert edu.description == "Minor in Statistics"


def test_split_education_on_repeated_degrees():
    section = "B.S. Physics\nState University\n2012 - 2016\nM.S. Physics\nTech Institute\n2016 - 2018"
    entries = split_education(section)
    assert len(entries) == 2
    assert parse_education(entries[1]).institution == "Tech Institute"


# ───────────────────────── projects ──
def test_project_fields():
    proj = parse_project(
        "Resume Parser\nA tool that structures PDF resumes.\n"
        "Technologies: Python, pdfplumber\nhttps://github.com/jane/resume-parser\n"
        "2021 - Present\n- Parsed 10k resumes with 95% accuracy"
    )
    assert proj.name == "Resume Parser"
    assert proj.description == "A tool that structures PDF resumes."
    assert proj.technologies == "Python, pdfplumber"
    assert proj.link == "https://github.com/jane/resume-parser"
    assert (proj.start_date, proj.end_date) == ("2021", "Present")
    assert proj.achievements == ["Parsed 10k resumes with 95% accuracy"]


def test_project_built_with_and_placeholder():
    proj = parse_project("Chat App\nReal-time chat built with React and Firebase")
    assert proj.technologies == "React and Firebase"
    assert proj.achievements == [""]


def test_project_description_skips_bullets_and_tech_lines():
    proj = parse_project("Scheduler\nTech Stack: Go, Redis\n- Handles 1M jobs per day\nCron replacement for the team")
    assert proj.description == "Cron replacement for the team"


def test_split_projects_after_bullets():
    section = "Alpha\n- Did a big thing here\nBeta\n- Did another thing\nTools: Go"
    entries = split_projects(section)
    assert [e.split("\n")[0] for e in entries] == ["Alpha", "Beta"]
    assert entries[1].endswith("Tools: Go")


@pytest.mark.parametrize("line", [
    "Tech Stack Go, PostGIS",
    "Technologies used Go, PostGIS",
    "Tools used: Go, PostGIS",
])
def test_project_technologies_colon_optional(line):
    proj = parse_project(f"Trip Planner\nRoute optimiser for road trips.\n{line}")
    assert proj.technologies == "Go, PostGIS"
    assert proj.description == "Route optimiser for road trips."
