"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def pubmed_xml() -> str:
    """efetch body with two valid articles and one missing its PMID."""
    return """<?xml version="1.0" ?>
<!DOCTYPE PubmedArticleSet PUBLIC "-//NLM//DTD PubMedArticle, 1st January 2024//EN" "">
<PubmedArticleSet>
<PubmedArticle>
    <MedlineCitation Status="MEDLINE" Owner="NLM">
        <PMID Version="1">38472913</PMID>
        <Article PubModel="Print">
            <Journal>
                <JournalIssue CitedMedium="Internet">
                    <PubDate>
                        <Year>2023</Year>
                        <Month>Jun</Month>
                    </PubDate>
                </JournalIssue>
                <Title>The Lancet</Title>
            </Journal>
            <ArticleTitle>Aspirin for primary prevention of cardiovascular events.</ArticleTitle>
            <ELocationID EIdType="doi" ValidYN="Y">10.1016/S0140-6736(23)00001-1</ELocationID>
            <Abstract>
                <AbstractText Label="BACKGROUND" NlmCategory="BACKGROUND">Aspirin is widely used.</AbstractText>
                <AbstractText Label="RESULTS" NlmCategory="RESULTS">Bleeding risk increased.</AbstractText>
            </Abstract>
            <AuthorList CompleteYN="Y">
                <Author ValidYN="Y">
                    <LastName>Smith</LastName>
                    <ForeName>John</ForeName>
                </Author>
                <Author ValidYN="Y">
                    <LastName>Doe</LastName>
                </Author>
            </AuthorList>
        </Article>
    </MedlineCitation>
</PubmedArticle>
<PubmedArticle>
    <MedlineCitation Status="MEDLINE" Owner="NLM">
        <Article PubModel="Print">
            <ArticleTitle>Record without an identifier</ArticleTitle>
        </Article>
    </MedlineCitation>
</PubmedArticle>
<PubmedArticle>
    <MedlineCitation Status="MEDLINE" Owner="NLM">
        <PMID Version="1">12345678</PMID>
        <Article PubModel="Print">
            <Journal>
                <JournalIssue CitedMedium="Internet">
                    <PubDate>
                        <MedlineDate>2019 Winter</MedlineDate>
                    </PubDate>
                </JournalIssue>
            </Journal>
            <ArticleTitle>Effects of <i>Lactobacillus</i> on gut health &amp; immunity</ArticleTitle>
            <Abstract>
                <AbstractText>Unstructured abstract text.</AbstractText>
            </Abstract>
        </Article>
    </MedlineCitation>
    <PubmedData>
        <ArticleIdList>
            <ArticleId IdType="pubmed">12345678</ArticleId>
            <ArticleId IdType="doi">10.1000/xyz123</ArticleId>
        </ArticleIdList>
    </PubmedData>
</PubmedArticle>
</PubmedArticleSet>
"""


@pytest.fixture
def drug_label() -> dict:
    """Trimmed openFDA /drug/label.json result."""
    return {
        "id": "a1b2c3",
        "set_id": "set-1",
        "effective_time": "20240115",
        "openfda": {
            "brand_name": ["Bayer Aspirin"],
            "generic_name": ["ASPIRIN"],
            "manufacturer_name": ["Bayer HealthCare LLC."],
            "route": ["ORAL"],
            "dosage_form": ["TABLET, COATED"],
            "substance_name": ["ASPIRIN"],
            "product_ndc": ["0280-2000"],
            "pharm_class_epc": [],
        },
        "purpose": ["Pain reliever"],
        "warnings": ["Reye's syndrome: Children and teenagers..."],
        "drug_interactions": [],
        "indications_and_usage": ["For the temporary relief of minor aches and pains"],
    }


@pytest.fixture
def adverse_event() -> dict:
    """Trimmed openFDA /drug/event.json result."""
    return {
        "safetyreportid": "10003301",
        "serious": "1",
        "seriousnesshospitalization": "1",
        "receivedate": "20140312",
        "occurcountry": "US",
        "patient": {
            "patientonsetage": "64",
            "patientonsetageunit": "801",
            "patientsex": "2",
            "drug": [
                {
                    "medicinalproduct": "ASPIRIN",
                    "drugindication": "PROPHYLAXIS",
                    "drugcharacterization": "1",
                    "activesubstance": {"activesubstancename": "ASPIRIN"},
                },
                {"medicinalproduct": "LISINOPRIL", "drugcharacterization": "2"},
            ],
            "reaction": [
                {"reactionmeddrapt": "Gastrointestinal haemorrhage", "reactionoutcome": "1"},
                {"reactionmeddrapt": "Anaemia"},
            ],
        },
    }


@pytest.fixture
def scholar_html() -> str:
    """Rendered Google Scholar results page with three result rows."""
    return """
<html><body>
<div id="gs_res_ccl_mid">
  <div class="gs_r gs_or gs_scl" data-rp="0">
    <div class="gs_ri">
      <h3 class="gs_rt"><a href="https://example.org/aspirin-trial" data-clk="x">Aspirin in the primary prevention of vascular disease</a></h3>
      <div class="gs_a">J Smith, A Jones - The Lancet</div>
      <div class="gs_rs">Low-dose aspirin reduced serious vascular events in 2001 patients.</div>
      <div class="gs_fl"><a href="javascript:void(0)">Save</a> <a href="/scholar?cites=123">Cited by 4521</a></div>
    </div>
  </div>
  <div class="gs_r gs_or gs_scl" data-rp="1">
    <div class="gs_ri">
      <h3 class="gs_rt"><span>[BOOK]</span> Clinical pharmacology of aspirin</h3>
      <div class="gs_a">P Brown</div>
      <div class="gs_rs">Snippet without any year.</div>
    </div>
  </div>
  <div class="gs_r gs_or gs_scl" data-rp="2">
    <div class="gs_ri">
      <h3 class="gs_rt"><a href="/citations?user=abc">OK</a></h3>
      <div class="gs_a">Somebody - Nowhere, 2020</div>
    </div>
  </div>
</div>
</body></html>
"""
