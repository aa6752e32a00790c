"""
Catalog Provider

Supplies the program records the engine ranks.
The engine never knows where a catalog came from: callers pass in records loaded
from a JSON file, an API response, or the built-in seed catalog below.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

from pydantic import ValidationError

from .contracts import ProgramRecord

logger = logging.getLogger(__name__)


def catalog_from_records(
    records: Iterable[Dict[str, Any]]
) -> List[ProgramRecord]:
    """
    Convert plain dicts into ProgramRecords.

    Records that fail validation are skipped so a partially bad catalog still loads.

    Args:
        records: Dicts matching ProgramRecord fields

    Returns:
        List of ProgramRecord in input order
    """
    catalog: List[ProgramRecord] = []

    for index, record in enumerate(records):
        try:
            catalog.append(ProgramRecord(**record))
        except (ValidationError, TypeError) as e:
            name = record.get("name") if isinstance(record, dict) else None
            logger.warning(f"Skipping catalog record #{index} ({name or 'unnamed'}): {e}")
            continue

    logger.debug(f"Catalog built: {len(catalog)} programs")
    return catalog


def load_catalog(path: Union[str, Path]) -> List[ProgramRecord]:
    """
    Load a catalog from a JSON file.

    The file holds either a list of program records or an object with a
    "programs" list.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("programs")

    if not isinstance(data, list):
        raise ValueError(f"Catalog file {path} must contain a list of programs")

    logger.info(f"📚 Loaded {len(data)} catalog records from {path}")
    return catalog_from_records(data)


def default_catalog() -> List[ProgramRecord]:
    """Built-in seed catalog of graduate computer science programs."""
    return catalog_from_records(SEED_PROGRAMS)


def _faculty(name: str, specialty: str, *keywords: str) -> Dict[str, Any]:
    return {"name": name, "specialty": specialty, "match_keywords": list(keywords)}


SEED_PROGRAMS: List[Dict[str, Any]] = [
    {
        "name": "Stanford University",
        "program_name": "Computer Science PhD",
        "offered_programs": ["Computer Science PhD", "Electrical Engineering PhD", "AI PhD"],
        "location": "Stanford, CA",
        "ranking": "#2 in Computer Science",
        "acceptance_rate": 0.038,
        "min_gpa": 3.8,
        "avg_gpa": 3.95,
        "research_areas": ["Machine Learning", "Computer Vision", "Natural Language Processing", "Robotics", "AI Safety"],
        "faculty": [
            _faculty("Prof. Fei-Fei Li", "Computer Vision", "computer vision", "deep learning", "AI"),
            _faculty("Prof. Andrew Ng", "Machine Learning", "machine learning", "neural networks", "AI"),
            _faculty("Prof. Christopher Manning", "Natural Language Processing", "NLP", "linguistics", "text analysis"),
        ],
        "tuition": "$58,416/year",
        "deadline": "December 15, 2025",
        "website_url": "https://www.stanford.edu",
        "strengths": ["Industry connections", "Research funding", "Silicon Valley location"],
        "concerns": ["Extremely competitive", "Very expensive", "High stress environment"],
    },
    {
        "name": "Massachusetts Institute of Technology",
        "program_name": "Computer Science PhD",
        "offered_programs": ["Computer Science PhD", "EECS PhD", "AI PhD"],
        "location": "Cambridge, MA",
        "ranking": "#1 in Computer Science",
        "acceptance_rate": 0.041,
        "min_gpa": 3.9,
        "avg_gpa": 3.98,
        "research_areas": ["Artificial Intelligence", "Systems", "Theory", "Graphics", "Robotics"],
        "faculty": [
            _faculty("Prof. Regina Barzilay", "NLP/Medical AI", "natural language processing", "medical AI", "computational linguistics"),
            _faculty("Prof. Tommi Jaakkola", "Machine Learning Theory", "machine learning", "theory", "statistics"),
            _faculty("Prof. Antonio Torralba", "Computer Vision", "computer vision", "deep learning", "perception"),
        ],
        "tuition": "$57,590/year",
        "deadline": "December 15, 2025",
        "website_url": "https://www.mit.edu",
        "strengths": ["Best CS program globally", "Cutting-edge research", "Strong alumni network"],
        "concerns": ["Extremely competitive", "Intense academic pressure", "High cost of living"],
    },
    {
        "name": "Carnegie Mellon University",
        "program_name": "Computer Science PhD",
        "offered_programs": ["Computer Science PhD", "Machine Learning PhD", "Robotics PhD"],
        "location": "Pittsburgh, PA",
        "ranking": "#3 in Computer Science",
        "acceptance_rate": 0.057,
        "min_gpa": 3.7,
        "avg_gpa": 3.88,
        "research_areas": ["Machine Learning", "Robotics", "Human-Computer Interaction", "Systems", "Theory"],
        "faculty": [
            _faculty("Prof. Tom Mitchell", "Machine Learning", "machine learning", "cognitive science", "AI"),
            _faculty("Prof. Ruslan Salakhutdinov", "Deep Learning", "deep learning", "neural networks", "representation learning"),
            _faculty("Prof. Manuela Veloso", "AI/Robotics", "robotics", "multi-agent systems", "AI planning"),
        ],
        "tuition": "$56,196/year",
        "deadline": "December 16, 2025",
        "website_url": "https://www.cmu.edu",
        "strengths": ["Top ML program", "Excellent robotics", "Strong industry ties"],
        "concerns": ["Highly competitive", "Intense workload", "Limited work-life balance"],
    },
    {
        "name": "University of California, Berkeley",
        "program_name": "EECS PhD",
        "offered_programs": ["EECS PhD", "Computer Science PhD"],
        "location": "Berkeley, CA",
        "ranking": "#4 in Computer Science",
        "acceptance_rate": 0.062,
        "min_gpa": 3.7,
        "avg_gpa": 3.85,
        "research_areas": ["Systems", "Theory", "AI/ML", "Security", "Graphics"],
        "faculty": [
            _faculty("Prof. Ion Stoica", "Distributed Systems", "systems", "distributed computing", "cloud computing"),
            _faculty("Prof. Pieter Abbeel", "Robotics/RL", "robotics", "reinforcement learning", "AI"),
            _faculty("Prof. Dawn Song", "Security/AI", "security", "AI safety", "privacy"),
        ],
        "tuition": "$48,465/year",
        "deadline": "December 19, 2025",
        "website_url": "https://www.berkeley.edu",
        "strengths": ["Strong in systems", "Great location", "Public school advantage"],
        "concerns": ["California resident preference", "High living costs", "Large program"],
    },
    {
        "name": "University of Washington",
        "program_name": "Computer Science PhD",
        "offered_programs": ["Computer Science PhD", "Data Science PhD"],
        "location": "Seattle, WA",
        "ranking": "#8 in Computer Science",
        "acceptance_rate": 0.083,
        "min_gpa": 3.6,
        "avg_gpa": 3.78,
        "research_areas": ["Machine Learning", "NLP", "Computer Vision", "HCI", "Systems"],
        "faculty": [
            _faculty("Prof. Pedro Domingos", "Machine Learning", "machine learning", "data mining", "AI"),
            _faculty("Prof. Luke Zettlemoyer", "Natural Language Processing", "NLP", "semantic parsing", "question answering"),
            _faculty("Prof. Ali Farhadi", "Computer Vision", "computer vision", "multimodal AI", "visual reasoning"),
        ],
        "tuition": "$36,898/year",
        "deadline": "December 15, 2025",
        "website_url": "https://www.washington.edu",
        "strengths": ["Tech industry connections", "Strong AI research", "Good funding"],
        "concerns": ["Competitive local job market", "Rainy weather", "Growing competition"],
    },
    {
        "name": "University of Toronto",
        "program_name": "Computer Science PhD",
        "offered_programs": ["Computer Science PhD", "Machine Learning PhD"],
        "location": "Toronto, Canada",
        "ranking": "#15 in Computer Science",
        "acceptance_rate": 0.095,
        "min_gpa": 3.5,
        "avg_gpa": 3.72,
        "research_areas": ["Machine Learning", "Computer Vision", "NLP", "AI", "Theory"],
        "faculty": [
            _faculty("Prof. Geoffrey Hinton", "Deep Learning", "deep learning", "neural networks", "AI"),
            _faculty("Prof. Raquel Urtasun", "Computer Vision", "computer vision", "autonomous driving", "3D vision"),
            _faculty("Prof. Sanja Fidler", "AI/Graphics", "computer graphics", "3D AI", "visual AI"),
        ],
        "tuition": "CAD $56,780/year (~$42K USD)",
        "deadline": "January 15, 2026",
        "website_url": "https://www.toronto.edu",
        "strengths": ["Deep learning legacy", "Vector Institute", "Lower costs"],
        "concerns": ["Visa requirements", "Cold winters", "Healthcare considerations"],
    },
    {
        "name": "Georgia Institute of Technology",
        "program_name": "Computer Science PhD",
        "offered_programs": ["Computer Science PhD", "Machine Learning PhD"],
        "location": "Atlanta, GA",
        "ranking": "#10 in Computer Science",
        "acceptance_rate": 0.12,
        "min_gpa": 3.5,
        "avg_gpa": 3.68,
        "research_areas": ["Machine Learning", "Robotics", "Graphics", "HCI", "Security"],
        "faculty": [
            _faculty("Prof. Le Song", "Machine Learning", "machine learning", "deep learning", "graph neural networks"),
            _faculty("Prof. Dhruv Batra", "Computer Vision", "computer vision", "embodied AI", "visual reasoning"),
            _faculty("Prof. Polo Chau", "Data Visualization", "data visualization", "human-AI interaction", "explainable AI"),
        ],
        "tuition": "$29,140/year",
        "deadline": "December 19, 2025",
        "website_url": "https://www.gatech.edu",
        "strengths": ["Strong industry ties", "Good value", "Growing reputation"],
        "concerns": ["Intense competition", "Large classes", "Limited prestige vs top schools"],
    },
    {
        "name": "University of Illinois Urbana-Champaign",
        "program_name": "Computer Science PhD",
        "offered_programs": ["Computer Science PhD", "Data Science PhD"],
        "location": "Urbana, IL",
        "ranking": "#5 in Computer Science",
        "acceptance_rate": 0.15,
        "min_gpa": 3.4,
        "avg_gpa": 3.65,
        "research_areas": ["Systems", "Theory", "AI/ML", "HCI", "Graphics"],
        "faculty": [
            _faculty("Prof. Jiawei Han", "Data Mining", "data mining", "machine learning", "big data"),
            _faculty("Prof. Tarek Abdelzaher", "Systems", "distributed systems", "IoT", "cyber-physical systems"),
            _faculty("Prof. Julia Hockenmaier", "Natural Language Processing", "computational linguistics", "NLP", "semantics"),
        ],
        "tuition": "$36,150/year",
        "deadline": "December 15, 2025",
        "website_url": "https://www.illinois.edu",
        "strengths": ["Strong systems research", "Good funding", "High acceptance rate"],
        "concerns": ["Rural location", "Cold winters", "Limited social scene"],
    },
    {
        "name": "University of California, San Diego",
        "program_name": "Computer Science PhD",
        "offered_programs": ["Computer Science PhD", "Cognitive Science PhD"],
        "location": "San Diego, CA",
        "ranking": "#16 in Computer Science",
        "acceptance_rate": 0.18,
        "min_gpa": 3.4,
        "avg_gpa": 3.62,
        "research_areas": ["Machine Learning", "Computer Vision", "HCI", "Bioinformatics"],
        "faculty": [
            _faculty("Prof. Zhuowen Tu", "Computer Vision", "computer vision", "deep learning", "medical imaging"),
            _faculty("Prof. Lawrence Saul", "Machine Learning", "machine learning", "dimensionality reduction", "speech recognition"),
            _faculty("Prof. Garrison Cottrell", "Neural Networks", "neural networks", "cognitive modeling", "face recognition"),
        ],
        "tuition": "$46,326/year",
        "deadline": "December 19, 2025",
        "website_url": "https://www.ucsd.edu",
        "strengths": ["Great weather", "Growing program", "Interdisciplinary research"],
        "concerns": ["Less prestigious", "Limited funding", "Competitive UC system"],
    },
    {
        "name": "University of Michigan",
        "program_name": "Computer Science PhD",
        "offered_programs": ["Computer Science PhD", "Robotics PhD"],
        "location": "Ann Arbor, MI",
        "ranking": "#12 in Computer Science",
        "acceptance_rate": 0.16,
        "min_gpa": 3.3,
        "avg_gpa": 3.58,
        "research_areas": ["Systems", "AI/ML", "Security", "HCI", "Theory"],
        "faculty": [
            _faculty("Prof. Satinder Singh", "Reinforcement Learning", "reinforcement learning", "AI", "robotics"),
            _faculty("Prof. Rada Mihalcea", "Natural Language Processing", "computational linguistics", "sentiment analysis", "multilingual NLP"),
            _faculty("Prof. Jason Flinn", "Mobile Systems", "mobile computing", "systems", "energy-efficient computing"),
        ],
        "tuition": "$53,232/year",
        "deadline": "December 15, 2025",
        "website_url": "https://www.umich.edu",
        "strengths": ["Well-rounded program", "Good industry connections", "Strong alumni network"],
        "concerns": ["Cold winters", "Expensive for public school", "Less cutting-edge research"],
    },
    {
        "name": "Rice University",
        "program_name": "Computer Science PhD",
        "offered_programs": ["Computer Science PhD", "Data Science PhD"],
        "location": "Houston, TX",
        "ranking": "#20 in Computer Science",
        "acceptance_rate": 0.25,
        "min_gpa": 3.3,
        "avg_gpa": 3.55,
        "research_areas": ["Systems", "Security", "Data Science", "HCI"],
        "faculty": [
            _faculty("Prof. Moshe Vardi", "Logic/Theory", "formal methods", "verification", "database theory"),
            _faculty("Prof. Luay Nakhleh", "Computational Biology", "bioinformatics", "computational biology", "phylogenetics"),
            _faculty("Prof. Dan Wallach", "Security", "computer security", "voting systems", "privacy"),
        ],
        "tuition": "$52,520/year",
        "deadline": "January 15, 2026",
        "website_url": "https://www.rice.edu",
        "strengths": ["Small program", "Personal attention", "Good weather"],
        "concerns": ["Limited research areas", "Less brand recognition", "Smaller network"],
    },
    {
        "name": "University of California, Irvine",
        "program_name": "Computer Science PhD",
        "offered_programs": ["Computer Science PhD", "Information & Computer Sciences PhD"],
        "location": "Irvine, CA",
        "ranking": "#30 in Computer Science",
        "acceptance_rate": 0.28,
        "min_gpa": 3.2,
        "avg_gpa": 3.48,
        "research_areas": ["Machine Learning", "Software Engineering", "Networks", "Security"],
        "faculty": [
            _faculty("Prof. Pierre Baldi", "Machine Learning", "machine learning", "bioinformatics", "neural networks"),
            _faculty("Prof. Charless Fowlkes", "Computer Vision", "computer vision", "image processing", "object recognition"),
            _faculty("Prof. Nikil Dutt", "Embedded Systems", "embedded systems", "computer architecture", "IoT"),
        ],
        "tuition": "$43,530/year",
        "deadline": "December 15, 2025",
        "website_url": "https://www.uci.edu",
        "strengths": ["High acceptance rate", "Growing program", "Good location"],
        "concerns": ["Less research prestige", "Newer program", "Limited funding"],
    },
]
