"""
Static fallback datasets.

Substituted verbatim when live extraction fails or yields too few records.
"""

from .models import GrantRecord, GrantStatus, PublicationRecord, RecordKind

FALLBACK_GRANTS = (
    GrantRecord(
        id=1,
        title="Autonomous Anomaly Detection in Streaming Data",
        details="KPM, Autonomous Anomaly Detection in Streaming Data, (Ref: RACER/1/2019/ICT02/UITM//4), Role: Team Member.",
        type="RACER",
        status=GrantStatus.COMPLETED,
    ),
    GrantRecord(
        id=2,
        title="Web Based E Commerce System For Rural Products Commercialization In Pulau Tuba Langkawi",
        details="UiTM LESTARI SDG@UiTM Grant, Web Based E Commerce System For Rural Products Commercialization In Pulau Tuba Langkawi, 600-RMC/LESTARI SDG-T 5/3 (142/2019), Role: Team Member.",
        type="LESTARI",
        status=GrantStatus.COMPLETED,
    ),
    GrantRecord(
        id=3,
        title="AUTISM JOURNEY DIRECTORY & DATA REPOSITORY SYSTEM",
        details="NASOM, AUTISM JOURNEY DIRECTORY & DATA REPOSITORY SYSTEM, Role: Team Member.",
        type="NASOM",
        status=GrantStatus.COMPLETED,
    ),
    GrantRecord(
        id=4,
        title="Portable Iot-based Smart Urban Farming: Technology Use Case Of Uitm And Unikom Bandung",
        details="Title : Portable Iot-based Smart Urban Farming: Technology Use Case Of Uitm And Unikom Bandung. Dr. Muhammad Izzad Bin Ramli, Profesor Dr Nursuriati Binti Jamil, Ts. Muhammad Azizi Bin Mohd Ariffin, 2021 - 2022, Other Grants, Project Member, RM 5,000.00",
        type="Other Grants",
        status=GrantStatus.COMPLETED,
    ),
    GrantRecord(
        id=5,
        title="Downtime Analysis For Uitm Data Centre",
        details="Title : Downtime Analysis For Uitm Data Centre. Profesor Dr Jasni Binti Mohamad Zain, Profesor Madya Dr Kamarularifin Bin Abd Jalil, Ts. Muhammad Azizi Bin Mohd Ariffin, 2020 - 2023, Special Research Grant (GPK), Project Member, RM 20,000.00.",
        type="GPK",
        status=GrantStatus.COMPLETED,
    ),
    GrantRecord(
        id=6,
        title="A New Technique To Ensure High Availability Of Software Application Services By Utilizing Fog Devices Resource Capabilities",
        details="Title : A New Technique To Ensure High Availability Of Software Application Services By Utilizing Fog Devices Resource Capabilities. Profesor Dr Jasni Binti Mohamad Zain, Luhur Bayuaji, Norkhushaini Bt Awang, Profesor Madya Dr Kamarularifin Bin Abd Jalil, Ts. Muhammad Azizi Bin Mohd Ariffin, 2021 - 2024, Fundamental Research Grant Scheme (FRGS), Project Member, RM 105,300.00",
        type="FRGS",
        status=GrantStatus.ACTIVE,
    ),
    GrantRecord(
        id=7,
        title="Coupled Hybrid Feature Extraction And Classification Of Radar Reflectivity Images For Convective-stratiform Tropical Rainfall Estimates",
        details="Title : Coupled Hybrid Feature Extraction And Classification Of Radar Reflectivity Images For Convective-stratiform Tropical Rainfall Estimates. Profesor Ts. Dr. Wardah Binti Tahir, Profesor Madya Zaidah Binti Ibrahim, Profesor Madya Ir.ts.dr Jazuri Bin Abdullah, Ir. Dr. Suzana Binti Ramli, Ts. Muhammad Azizi Bin Mohd Ariffin, 2021 - 2024, Fundamental Research Grant Scheme (FRGS), Project Member, RM 137,500.00",
        type="FRGS",
        status=GrantStatus.ACTIVE,
    ),
)

FALLBACK_PUBLICATIONS = (
    PublicationRecord(
        id=1,
        title="Network traffic profiling using data mining technique in campus environment",
        authors="M. A. M. Ariffin, R. Ishak, S. A. Ahmad, and Z. Kasiran",
        venue="International Journal of Advanced Trends in Computer Science and Engineering",
        year="2020",
        citations="15",
        link="#",
    ),
    PublicationRecord(
        id=2,
        title="Data leakage detection in cloud computing platform",
        authors="M. A. M. Ariffin, K. A. Rahman, M. Y. Darus, N. Awang, and Z. Kasiran",
        venue="International Journal of Advanced Trends in Computer Science and Engineering",
        year="2019",
        citations="12",
        link="#",
    ),
    PublicationRecord(
        id=3,
        title="API Vulnerabilities In Cloud Computing Platform: Attack And Detection",
        authors="M. A. M. Ariffin, M. F. Ibrahim and Z. Kasiran",
        venue="International Journal of Engineering Trends and Technology (IJETT)",
        year="2020",
        citations="8",
        link="#",
    ),
    PublicationRecord(
        id=4,
        title="Multi-level resilience in networked environments: Concepts & principles",
        authors="M. A. M. Ariffin, A. K. Marnerides, and A. U. Mauthe",
        venue="2017 14th IEEE Annual Consumer Communications and Networking Conference",
        year="2017",
        citations="25",
        link="#",
    ),
    PublicationRecord(
        id=5,
        title="Automatic Climate Control for Mushroom Cultivation using IoT Approach",
        authors="Ariffin, M., Ramli, M., Amin, M., Ismail, M., Zainol, Z., Ahmad, N., & Jamil, N.",
        venue="2020 IEEE 10th International Conference on System Engineering and Technology (ICSET)",
        year="2020",
        citations="18",
        link="#",
    ),
    PublicationRecord(
        id=6,
        title="IoT-Based Flash Flood Detection and Alert Using TensorFlow",
        authors="Rashid, A.A., Ariffin, M.A.M., Kasiran, Z.",
        venue="Proceedings - 2021 11th IEEE International Conference on Control System, Computing and Engineering",
        year="2021",
        citations="10",
        link="#",
    ),
    PublicationRecord(
        id=7,
        title="Local File Inclusion Vulnerability Scanner with Tor Proxy",
        authors="K. A. H. H. B. C. K. M. Sahidi, M. A. M. Ariffin, M. I. Ramli and Z. Kasiran",
        venue="2021 IEEE International Conference on Signal and Image Processing Applications (ICSIPA)",
        year="2021",
        citations="5",
        link="#",
    ),
    PublicationRecord(
        id=8,
        title="A Case Study On Digital Divide And Access To Information Communication Technologies (Icts) In Pulau Tuba, Langkawi, Malaysia",
        authors="Et. al., M.",
        venue="Turkish Journal Of Computer And Mathematics Education (TURCOMAT)",
        year="2021",
        citations="7",
        link="#",
    ),
    PublicationRecord(
        id=9,
        title="Detecting Anomaly in IoT Devices using Multi-Threaded Autonomous Anomaly Detection",
        authors="MYI Basheer, AM Ali, NHA Hamid, MAM Ariffin, R Osman, S Nordin",
        venue="2021 4th International Symposium on Agents, Multi-Agent Systems and Robotics",
        year="2021",
        citations="3",
        link="#",
    ),
    PublicationRecord(
        id=10,
        title="Implementation Of Dynamic Honeypot On Raspberry Pi",
        authors="ADI RIDZAN ADNAN, MUHAMMAD AZIZI BIN MOHD ARIFFIN",
        venue="i-IDeA 2020 - 5TH INTERNATIONAL INNOVATION, DESIGN & ARTICULATION",
        year="2021",
        citations="2",
        link="#",
    ),
)

FALLBACKS = {
    RecordKind.GRANTS: FALLBACK_GRANTS,
    RecordKind.PUBLICATIONS: FALLBACK_PUBLICATIONS,
}


def get_fallback(kind: RecordKind) -> tuple:
    """Return the fallback dataset for a record kind."""
    return FALLBACKS[RecordKind(kind)]
