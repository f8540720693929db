from __future__ import annotations

from skills_matrix.models.entities import Person, Position, Skill

SKILLS: list[Skill] = [
    Skill(id="s_comm", name="Communication"),
    Skill(id="s_cust_service", name="Customer Service"),
    Skill(id="s_data_analysis", name="Data Analysis"),
    Skill(id="s_project_mgmt", name="Project Management"),
    Skill(id="s_leadership", name="Leadership"),
    Skill(id="s_technical_writing", name="Technical Writing"),
    Skill(id="s_sql", name="SQL"),
    Skill(id="s_excel", name="Excel/Spreadsheets"),
    Skill(id="s_presentation", name="Presentation Skills"),
    Skill(id="s_problem_solving", name="Problem Solving"),
    Skill(id="s_team_collaboration", name="Team Collaboration"),
    Skill(id="s_strategic_thinking", name="Strategic Thinking"),
]

POSITIONS: list[Position] = [
    Position(
        id="p_analyst",
        name="Data Analyst",
        requirements={
            "s_data_analysis": 3,
            "s_sql": 3,
            "s_excel": 2,
            "s_comm": 2,
            "s_technical_writing": 2,
            "s_problem_solving": 2,
        },
    ),
    Position(
        id="p_cust_success",
        name="Customer Success Manager",
        requirements={
            "s_cust_service": 3,
            "s_comm": 3,
            "s_project_mgmt": 2,
            "s_problem_solving": 2,
            "s_presentation": 2,
            "s_team_collaboration": 2,
        },
    ),
    Position(
        id="p_project_mgr",
        name="Project Manager",
        requirements={
            "s_project_mgmt": 3,
            "s_leadership": 3,
            "s_comm": 3,
            "s_strategic_thinking": 2,
            "s_presentation": 2,
            "s_team_collaboration": 3,
        },
    ),
    Position(
        id="p_senior_analyst",
        name="Senior Data Analyst",
        requirements={
            "s_data_analysis": 3,
            "s_sql": 3,
            "s_excel": 3,
            "s_comm": 3,
            "s_technical_writing": 3,
            "s_problem_solving": 3,
            "s_presentation": 2,
            "s_leadership": 2,
        },
    ),
    Position(
        id="p_coordinator",
        name="Coordinator",
        requirements={
            "s_comm": 2,
            "s_team_collaboration": 2,
            "s_project_mgmt": 1,
            "s_excel": 1,
            "s_problem_solving": 1,
        },
    ),
]

PEOPLE: list[Person] = [
    Person(
        id="e_jdoe",
        name="John Doe",
        position_id="p_analyst",
        acquired={
            "s_data_analysis": 2,
            "s_sql": 3,
            "s_excel": 2,
            "s_comm": 1,
            "s_technical_writing": 1,
            "s_problem_solving": 2,
            "s_presentation": 2,
        },
    ),
    Person(
        id="e_asmith",
        name="Alice Smith",
        position_id="p_cust_success",
        acquired={
            "s_cust_service": 3,
            "s_comm": 3,
            "s_project_mgmt": 2,
            "s_problem_solving": 3,
            "s_presentation": 3,
            "s_team_collaboration": 2,
            "s_leadership": 1,
        },
    ),
    Person(
        id="e_bjones",
        name="Bob Jones",
        position_id="p_coordinator",
        acquired={
            "s_comm": 3,
            "s_team_collaboration": 3,
            "s_project_mgmt": 2,
            "s_excel": 2,
            "s_problem_solving": 2,
            "s_cust_service": 2,
            "s_presentation": 1,
        },
    ),
    Person(
        id="e_cwilson",
        name="Carol Wilson",
        position_id="p_analyst",
        acquired={
            "s_data_analysis": 3,
            "s_sql": 2,
            "s_excel": 3,
            "s_comm": 2,
            "s_technical_writing": 3,
            "s_problem_solving": 3,
            "s_leadership": 2,
            "s_strategic_thinking": 1,
        },
    ),
    Person(
        id="e_dlee",
        name="David Lee",
        position_id="p_project_mgr",
        acquired={
            "s_project_mgmt": 3,
            "s_leadership": 2,
            "s_comm": 3,
            "s_strategic_thinking": 2,
            "s_presentation": 2,
            "s_team_collaboration": 3,
            "s_problem_solving": 2,
        },
    ),
    Person(
        id="e_ebrown",
        name="Emma Brown",
        position_id="p_coordinator",
        acquired={
            "s_comm": 2,
            "s_team_collaboration": 3,
            "s_project_mgmt": 1,
            "s_excel": 2,
            "s_problem_solving": 2,
            "s_cust_service": 3,
            "s_presentation": 2,
            "s_data_analysis": 1,
        },
    ),
]
