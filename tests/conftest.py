"""Shared fixtures: sample profile pages."""

import pytest


SCHOLAR_ROW = """
<tr class="gsc_a_tr">
    <td class="gsc_a_t">
        <a href="/citations?view_op=view_citation&amp;citation_for_view=EygguTUAAAAJ:{i}" class="gsc_a_at">{title}</a><div class="gs_gray">M. A. M. Ariffin, Z. Kasiran</div><div class="gs_gray">Journal {i}</div>
    </td>
    <td class="gsc_a_c"><a href="#" class="gsc_a_ac">{cites}</a></td>
    <td class="gsc_a_y"><span class="gsc_a_h">{year}</span></td>
</tr>
"""


def build_scholar_page(count: int, title: str = "Paper {i}") -> str:
    rows = "".join(
        SCHOLAR_ROW.format(i=i, title=title.format(i=i), cites=i * 3, year=2018 + i)
        for i in range(1, count + 1)
    )
    return f"""
    <html>
    <body>
        <div id="gsc_prf_in">Profile</div>
        <table id="gsc_a_t"><tbody id="gsc_a_b">{rows}</tbody></table>
    </body>
    </html>
    """


@pytest.fixture
def scholar_page():
    """Factory for Google Scholar style pages with N publication rows."""
    return build_scholar_page


@pytest.fixture
def expert_page():
    """UiTM Expert style page with grant blocks."""
    return """
    <html>
    <body>
        <div class="research-list">
            <div class="research-item">
                Coupled Hybrid Feature Extraction Of Radar Reflectivity Images
                Fundamental Research Grant Scheme (FRGS), 2021 - 2024, Project Member
            </div>
            <div class="research-item">
                Downtime Analysis For Uitm Data Centre
                Special Research Grant (GPK), Completed 2023
            </div>
            <div class="research-item">Contact us</div>
            <div class="research-item">
                KPM, Autonomous Anomaly Detection in Streaming Data, (Ref: RACER/1/2019/ICT02/UITM//4), Role: Team Member.
            </div>
        </div>
    </body>
    </html>
    """
