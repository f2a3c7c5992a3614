"""
Embedded clinical reference guides, keyed by metric name.

Each guide is markup-annotated free text (``<strong>`` headings, ``<br/>``
line breaks, ``•`` bullets) with a "Normal Range:" section and usually an
"Interpretation:" section. The range parser reads bounds and interpretation
strings straight out of this text, so the bullet layout matters: the first
line of the Normal Range section holds the canonical range.
"""

from types import MappingProxyType

from clinical_metrics.domain.models import MetricGuide

_GUIDES: dict[str, str] = {
    # EEG band powers
    "Delta Power": """
    <strong>Delta Power (0.5-4 Hz)</strong><br/>
    Delta wave power in microvolts squared (μV²)<br/><br/>

    <strong>Description:</strong> Lowest frequency brain waves, dominant during deep sleep and unconscious states. In healthy awake adults delta activity is minimal.<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 50-150 μV²: Normal range for awake adults<br/>
    • Below 50 μV²: Low delta activity (normal in wakefulness)<br/>
    • Above 150 μV²: Excessive delta (possible brain dysfunction or drowsiness)<br/><br/>

    <strong>Interpretation:</strong><br/>
    • 50-150 μV²: Healthy waking brain activity<br/>
    • Below 50 μV²: Clear, alert state<br/>
    • Above 150 μV²: Drowsiness or possible neurological issue<br/>

    <strong>Reference:</strong> Electroencephalography Normal Waveforms, StatPearls
    """,
    "Theta Power": """
    <strong>Theta Power (4-7 Hz)</strong><br/>
    Theta wave power in microvolts squared (μV²)<br/><br/>

    <strong>Description:</strong> Associated with creativity, intuition and light sleep.<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 80-200 μV²: Normal range for adults<br/>
    • Below 80 μV²: Low theta activity<br/>
    • Above 200 μV²: Elevated theta (creative state or drowsiness)<br/><br/>

    <strong>Interpretation:</strong><br/>
    • 80-200 μV²: Creative, intuitive thinking<br/>
    • Below 80 μV²: Clear and focused state<br/>
    • Above 200 μV²: Drowsiness or deep meditation<br/>

    <strong>Reference:</strong> EEG Frequency Bands Clinical Reference
    """,
    "Alpha Power": """
    <strong>Alpha Power (8-13 Hz)</strong><br/>
    Alpha wave power in microvolts squared (μV²)<br/><br/>

    <strong>Description:</strong> Dominant rhythm in relaxed wakefulness with eyes closed.<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 200-500 μV²: Normal range for healthy adults<br/>
    • Below 200 μV²: Low alpha activity (possible stress or overstimulation)<br/>
    • Above 500 μV²: High alpha activity (very relaxed state)<br/><br/>

    <strong>Interpretation:</strong><br/>
    • 200-500 μV²: Calm, relaxed wakefulness<br/>
    • Below 200 μV²: Mental tension or overstimulation<br/>
    • Above 500 μV²: Deep relaxation or meditation<br/>

    <strong>Reference:</strong> Clinical EEG Normal Patterns, NCBI
    """,
    "Beta Power": """
    <strong>Beta Power (13-30 Hz)</strong><br/>
    Beta wave power in microvolts squared (μV²)<br/><br/>

    <strong>Description:</strong> Associated with active thinking and focused mental activity.<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 100-300 μV²: Normal range for active adults<br/>
    • Below 100 μV²: Low mental activity or relaxed state<br/>
    • Above 300 μV²: High mental activity or possible anxiety<br/><br/>

    <strong>Interpretation:</strong><br/>
    • 100-300 μV²: Active thinking and problem solving<br/>
    • Below 100 μV²: Mental relaxation or drowsiness<br/>
    • Above 300 μV²: High mental activity or possible anxiety<br/>

    <strong>Reference:</strong> EEG Clinical Assessment Guidelines
    """,
    "Gamma Power": """
    <strong>Gamma Power (30+ Hz)</strong><br/>
    Gamma wave power in microvolts squared (μV²)<br/><br/>

    <strong>Description:</strong> Highest frequency brain waves, associated with consciousness and attention.<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 50-200 μV²: Normal range for cognitive processing<br/>
    • Below 50 μV²: Low gamma activity<br/>
    • Above 200 μV²: High gamma activity (intense cognitive processing)<br/><br/>

    <strong>Interpretation:</strong><br/>
    • 50-200 μV²: Conscious cognition and attention<br/>
    • Below 50 μV²: Reduced cognitive processing<br/>
    • Above 200 μV²: Intense focus or muscle interference<br/>

    <strong>Reference:</strong> Gamma Oscillations in Cognitive Processing
    """,
    "Hemispheric Balance": """
    <strong>Hemispheric Balance</strong><br/>
    Left-right brain hemisphere activity balance (-1.0 to 1.0)<br/><br/>

    <strong>Description:</strong> Asymmetry index of left and right hemisphere EEG activity, usually from alpha power ratios.<br/><br/>

    <strong>Normal Range:</strong><br/>
    • -0.1 to 0.1: Balanced hemispheric activity<br/>
    • -0.3 to -0.1: Right hemisphere dominance (creative, spatial processing)<br/>
    • 0.1 to 0.3: Left hemisphere dominance (logical, verbal processing)<br/><br/>

    <strong>Interpretation:</strong><br/>
    • -0.1 to 0.1: Balanced left-right brain activity<br/>
    • Below -0.1: Right brain dominance (creative, spatial thinking)<br/>
    • Above 0.1: Left brain dominance (logical, verbal thinking)<br/>

    <strong>Reference:</strong> Davidson, R.J. Hemispheric Asymmetry Research
    """,
    "Emotional Stability": """
    <strong>Emotional Stability</strong><br/>
    Emotional regulation and stability index (0.0-1.0 scale)<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 0.7-0.9: Excellent emotional stability<br/>
    • 0.5-0.7: Moderate emotional regulation<br/>
    • Below 0.5: Poor emotional stability (possible emotional distress)<br/><br/>

    <strong>Interpretation:</strong><br/>
    • 0.7-0.9: Stable emotional state<br/>
    • 0.5-0.7: Moderate emotional regulation<br/>
    • Below 0.5: Emotional instability or stress<br/><br/>

    <strong>Reference:</strong> Emotional EEG Assessment Research
    """,
    "Signal Quality": """
    <strong>Signal Quality</strong><br/>
    EEG signal reliability and artifact-free ratio (0.0-1.0 scale)<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 0.8-1.0: Excellent signal quality<br/>
    • 0.6-0.8: Good signal quality<br/>
    • Below 0.6: Poor signal quality (unreliable data)<br/><br/>

    <strong>Interpretation:</strong><br/>
    • 0.8-1.0: Excellent signal quality<br/>
    • 0.6-0.8: Good signal quality<br/>
    • Below 0.6: Signal needs improvement<br/><br/>

    <strong>Reference:</strong> EEG Signal Quality Assessment Standards
    """,
    "Artifact Ratio": """
    <strong>Artifact Ratio</strong><br/>
    Proportion of EEG signal contaminated by artifacts (0.0-1.0 scale)<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 0.0-0.1: Minimal noise (excellent recording)<br/>
    • 0.1-0.3: Moderate noise (analyzable)<br/>
    • Above 0.3: High artifact contamination (poor data quality)<br/><br/>

    <strong>Interpretation:</strong><br/>
    • 0.0-0.1: Very clean signal<br/>
    • 0.1-0.3: Analyzable signal<br/>
    • Above 0.3: Electrode contact needs improvement<br/><br/>

    <strong>Reference:</strong> EEG Artifact Detection Guidelines
    """,
    # EEG indices
    "Focus": """
    <strong>Description:</strong> Cognitive concentration level, the ratio of beta power to the sum of alpha and theta power.<br/>
    <strong>Formula:</strong> Focus Index = Beta Power / (Alpha Power + Theta Power)<br/>
    <strong>Normal Range:</strong> 1.8 - 2.4<br/>
    <strong>Interpretation:</strong><br/>
    • 1.8 - 2.4: Optimal cognitive focus<br/>
    • Below 1.8: Inattention or drowsiness<br/>
    • Above 2.4: Excessive focus or stress<br/>
    <strong>Reference:</strong> Klimesch, W. (1999). Brain Research Reviews, 29(2-3), 169-195
    """,
    "Arousal": """
    <strong>Description:</strong> Mental arousal and relaxation from relative alpha activity.<br/>
    <strong>Formula:</strong> Arousal Index = Alpha Power / (Alpha Power + Beta Power)<br/>
    <strong>Normal Range:</strong> 0.18 - 0.22 (normal tension state)<br/>
    <strong>Interpretation:</strong><br/>
    • 0.18 - 0.22: Balanced arousal and relaxation<br/>
    • Below 0.18: Tension and stress<br/>
    • Above 0.22: Excessive relaxation<br/>
    <strong>Reference:</strong> Bazanova, O. M., &amp; Vernon, D. (2014). Neuroscience &amp; Biobehavioral Reviews, 44, 94-110
    """,
    "Stress Index": """
    <strong>Description:</strong> Mental stress and arousal, rising with high-frequency (beta, gamma) activity.<br/>
    <strong>Formula:</strong> Stress Index = (Beta Power + Gamma Power) / (Alpha Power + Theta Power)<br/>
    <strong>Normal Range:</strong> 2.8 - 4.0 (normal range)<br/>
    <strong>Interpretation:</strong><br/>
    • 2.8-4.0: Balanced mental state<br/>
    • Below 2.8: Excessive relaxation or low mental activity<br/>
    • Above 4.0: Elevated stress or mental tension<br/>
    <strong>Reference:</strong> Ahn, J. W., et al. (2019). Sensors, 19(21), 4644
    """,
    "L-R Balance": """
    <strong>Description:</strong> Balance of alpha activity between the hemispheres.<br/>
    <strong>Formula:</strong> (Left Alpha - Right Alpha) / (Left Alpha + Right Alpha)<br/>
    <strong>Normal Range:</strong> -0.1 ~ 0.1 (balanced state)<br/>
    <strong>Interpretation:</strong> Below -0.1: Creative thinking (right brain dominance); Above 0.1: Logical thinking (left brain dominance)<br/>
    <strong>Reference:</strong> Davidson, R. J. (2004). Biological Psychology, 67(1-2), 219-234
    """,
    "Cognitive Load": """
    <strong>Description:</strong> Mental workload and effort from the theta/alpha ratio.<br/>
    <strong>Formula:</strong> Cognitive Load = Theta Power / Alpha Power<br/>
    <strong>Normal Range:</strong> 0.3 - 0.8 (optimal load)<br/>
    <strong>Interpretation:</strong> Below 0.3: Low engagement; Above 0.8: High cognitive load; Above 1.2: Overload<br/>
    <strong>Reference:</strong> Gevins, A., &amp; Smith, M. E. (2003). Theoretical Issues in Ergonomics Science, 4(1-2), 113-131
    """,
    "Valence": """
    <strong>Description:</strong> Emotional regulation from the ratio of low-frequency to gamma power.<br/>
    <strong>Formula:</strong> Valence = (Alpha Power + Theta Power) / Gamma Power<br/>
    <strong>Normal Range:</strong> 0.4 - 0.8 (normal range)<br/>
    <strong>Interpretation:</strong> Below 0.4: Emotional instability, overarousal; Above 0.8: Emotional blunting, over-suppression<br/>
    <strong>Reference:</strong> Knyazev, G. G. (2007). Neuroscience &amp; Biobehavioral Reviews, 31(3), 377-395
    """,
    "EEG Total Power": """
    <strong>Neural Activity</strong><br/>
    <strong>Description:</strong> Sum of all EEG band powers, overall central nervous system activity.<br/>
    <strong>Formula:</strong> Sum of Delta + Theta + Alpha + Beta + Gamma band powers<br/>
    <strong>Normal Range:</strong> 850-1150 μV²<br/>
    <strong>Interpretation:</strong><br/>
    • 850-1150: Balanced overall brain activity<br/>
    • Above 1150: Excessive CNS activation (hyperarousal, stress, high cognitive load)<br/>
    • Below 850: Suppressed CNS activation (hypoarousal, drowsiness, low engagement)<br/>
    <strong>Reference:</strong> Klimesch, W. (1999). EEG alpha and theta oscillations reflect cognitive and memory performance
    """,
    # PPG indices
    "Heart Rate (BPM)": """
    <strong>BPM (Beats Per Minute)</strong><br/>
    Heart rate - Number of heartbeats per minute<br/><br/>

    <strong>Measurement Method:</strong> Calculated from peak intervals in the PPG signal<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 60-100 BPM: Normal range<br/>
    • Below 60 BPM: Bradycardia (low heart rate)<br/>
    • Above 100 BPM: Tachycardia (high heart rate)<br/><br/>

    <strong>Interpretation:</strong> Basic cardiovascular health indicator, affected by exercise, stress and medication<br/><br/>

    <strong>Reference:</strong> American Heart Association Guidelines
    """,
    "BPM": """
    <strong>BPM (Beats Per Minute)</strong><br/>
    Heart rate - Number of heartbeats per minute<br/><br/>

    <strong>Measurement Method:</strong> Calculated from peak intervals in the PPG signal<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 60-100 BPM: Normal range<br/>
    • Below 60 BPM: Bradycardia (low heart rate)<br/>
    • Above 100 BPM: Tachycardia (high heart rate)<br/><br/>

    <strong>Interpretation:</strong><br/>
    • 60-100 BPM: Healthy resting heart rate<br/>
    • Below 60 BPM: Athletic conditioning or possible bradycardia<br/>
    • Above 100 BPM: Heart rate raised by stress or activity<br/>

    <strong>Reference:</strong> American Heart Association Guidelines
    """,
    "HRV (ms)": """
    <strong>HRV (Heart Rate Variability)</strong><br/>
    Overall heart rate variability in milliseconds (RMSSD)<br/><br/>

    <strong>Description:</strong> RMSSD measure of beat-to-beat variation, reflecting autonomic balance and cardiovascular health.<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 20-200 ms: Wide normal range varies by age and fitness<br/>
    • 50-100 ms: Young adults<br/>
    • 35-60 ms: Middle-aged adults<br/>
    • 30-50 ms: Older adults<br/>
    • 70-200+ ms: Athletes<br/><br/>

    <strong>Interpretation:</strong><br/>
    • 50-100 ms: Normal variability (young adults)<br/>
    • Below 20 ms: Very low variability (severe stress or health problems)<br/>
    • 20-50 ms: Low variability (fatigue, stress or aging)<br/>
    • Above 100 ms: Excellent cardiovascular health and resilience<br/>
    • Above 150 ms: Outstanding cardiovascular health (athlete level)<br/><br/>

    <strong>Reference:</strong> Heart Rate Variability Standards, European Society of Cardiology
    """,
    "SpO2": """
    <strong>SpO2 (Oxygen Saturation)</strong><br/>
    Oxygen saturation - Oxygen concentration in blood<br/><br/>

    <strong>Measurement Method:</strong> Beer-Lambert law using the Red/IR absorption ratio<br/>
    • R = (Red_AC/Red_DC) / (IR_AC/IR_DC)<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 98-100%: Normal oxygen saturation<br/>
    • 95-98%: Normal range (lower bound)<br/>
    • 90-95%: Mild hypoxemia<br/>
    • Below 90%: Severe hypoxemia (medical consultation needed)<br/><br/>

    <strong>Interpretation:</strong><br/>
    • 95-100%: Normal oxygen saturation<br/>
    • 90-95%: Mild hypoxemia<br/>
    • Below 90%: Severe hypoxemia (medical consultation needed)<br/><br/>

    <strong>Reference:</strong> Pulse Oximetry Principles, IEEE TBME
    """,
    "Stress": """
    <strong>Stress Index</strong><br/>
    HRV-based normalized stress level (0.0-1.0)<br/><br/>

    <strong>Formula:</strong> Weighted average of normalized SDNN, RMSSD and heart rate<br/>
    • Stress = (Normalized SDNN × 0.4) + (Normalized RMSSD × 0.4) + (Heart Rate Stress × 0.2)<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 0.30-0.70: Normal range (balanced state)<br/>
    • 0.00-0.30: Very low stress (excessive relaxation)<br/>
    • 0.70-0.90: High stress (tension)<br/>
    • 0.90-1.00: Very high stress (severe tension)<br/><br/>

    <strong>Interpretation:</strong><br/>
    • 0.30-0.70: Balanced state<br/>
    • 0.00-0.30: Very relaxed state<br/>
    • 0.70-1.00: High stress state<br/><br/>

    <strong>Reference:</strong> HRV Analysis Methods, Frontiers in Physiology
    """,
    "SDNN": """
    <strong>SDNN (Standard Deviation of NN intervals)</strong><br/>
    Standard deviation of NN intervals - Overall HRV level<br/><br/>

    <strong>Formula:</strong> SDNN = √(Σ(RRᵢ - RR̄)² / (N-1))<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 50-100 ms: Young adults<br/>
    • 35-60 ms: Middle-aged adults<br/>
    • 30-50 ms: Older adults<br/>
    • Above 100 ms: Athletes or excellent cardiovascular health<br/><br/>

    <strong>Interpretation:</strong><br/>
    • 50-100 ms: Normal variability (young adults)<br/>
    • Below 30 ms: Very low variability (severely reduced resilience)<br/>
    • 30-50 ms: Low variability (fatigue or aging)<br/>
    • Above 100 ms: Excellent cardiovascular health<br/>
    • Above 150 ms: Outstanding cardiovascular health (athlete level)<br/><br/>

    <strong>Reference:</strong> Task Force of ESC/NASPE, 1996
    """,
    "RMSSD": """
    <strong>RMSSD (Root Mean Square of Successive Differences)</strong><br/>
    Root mean square of successive RR interval differences - Primary HRV measure<br/><br/>

    <strong>Formula:</strong> RMSSD = √(Σ(RRᵢ₊₁ - RRᵢ)² / (N-1))<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 20-200 ms: Wide normal range varies by age and fitness<br/>
    • 50-100 ms: Young adults<br/>
    • 35-60 ms: Middle-aged adults<br/>
    • 30-50 ms: Older adults<br/>
    • 70-200+ ms: Athletes<br/><br/>

    <strong>Interpretation:</strong><br/>
    • 50-100 ms: Normal variability (young adults)<br/>
    • Below 20 ms: Very low variability (severe stress or health problems)<br/>
    • 20-50 ms: Low variability (fatigue, stress or aging)<br/>
    • Above 100 ms: Excellent cardiovascular health and resilience<br/>
    • Above 150 ms: Outstanding cardiovascular health (athlete level)<br/><br/>

    <strong>Reference:</strong> Task Force of ESC/NASPE, 1996
    """,
    "PNN50": """
    <strong>PNN50 (Percentage of NN50)</strong><br/>
    Percentage of successive NN intervals differing by more than 50ms<br/><br/>

    <strong>Formula:</strong> PNN50 = (NN50 count / Total NN intervals) × 100%<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 10-50%: Normal range (healthy variability)<br/>
    • Below 10%: Low variability (tension or fatigue)<br/>
    • 20-50%: Excellent variability (strong recovery)<br/>
    • Above 50%: Very high variability (elite athlete level)<br/><br/>

    <strong>Interpretation:</strong><br/>
    • 10-50%: Normal, healthy parasympathetic activity<br/>
    • Below 10%: Reduced parasympathetic activity<br/>
    • Above 30%: Excellent recovery capacity<br/><br/>

    <strong>Reference:</strong> Task Force of ESC/NASPE, 1996
    """,
    "LF": """
    <strong>LF (Low Frequency Power)</strong><br/>
    Low frequency band power (0.04-0.15 Hz) - Sympathetic activity indicator<br/><br/>

    <strong>Measurement Method:</strong> Welch periodogram of RR intervals<br/>
    <strong>Unit:</strong> ms² (milliseconds squared)<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 200-1,200 ms²: Adequate sympathetic activity (study mean: 519±291 ms²)<br/>
    • Below 200 ms²: Low sympathetic nervous activity (excessive rest)<br/>
    • Above 1,200 ms²: High sympathetic nervous activity (stress or tension)<br/><br/>

    <strong>Interpretation:</strong><br/>
    • 200-1,200 ms²: Normal sympathetic activity<br/>
    • Below 200 ms²: Excessive rest<br/>
    • Above 1,200 ms²: Stress or tension<br/><br/>

    <strong>Reference:</strong> Task Force of ESC/NASPE, 1996; Shaffer &amp; Ginsberg, 2017
    """,
    "HF": """
    <strong>HF (High Frequency Power)</strong><br/>
    High frequency band power (0.15-0.4 Hz) - Parasympathetic activity indicator<br/><br/>

    <strong>Measurement Method:</strong> Welch periodogram of RR intervals<br/>
    <strong>Unit:</strong> ms² (milliseconds squared)<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 80-4,000 ms²: Adequate parasympathetic activity (study mean: 657±777 ms²)<br/>
    • Below 80 ms²: Low parasympathetic nervous activity (stress or fatigue)<br/>
    • Above 4,000 ms²: High parasympathetic nervous activity (deep rest)<br/><br/>

    <strong>Interpretation:</strong><br/>
    • 80-4,000 ms²: Normal parasympathetic activity<br/>
    • Below 80 ms²: Stress or fatigue<br/>
    • Above 4,000 ms²: Deep rest<br/><br/>

    <strong>Reference:</strong> Task Force of ESC/NASPE, 1996; Shaffer &amp; Ginsberg, 2017
    """,
    "LF/HF": """
    <strong>LF/HF Ratio</strong><br/>
    Low frequency/High frequency power ratio - Autonomic nervous balance<br/><br/>

    <strong>Formula:</strong> LF/HF = LF Power / HF Power<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 1.0-10.0: Normal range (study mean: 2.8±2.6, recommended balance: 1.5-2.5)<br/>
    • Below 1.0: Parasympathetic dominance (very comfortable state)<br/>
    • 1.5-2.5: Ideal balance<br/>
    • 2.5-10.0: Sympathetic dominance (active or tense state)<br/>
    • Above 10.0: Severe stress<br/><br/>

    <strong>Interpretation:</strong><br/>
    • 1.5-2.5: Ideal balance<br/>
    • Below 1.5: Parasympathetic dominance (resting state)<br/>
    • Above 2.5: Sympathetic dominance (stress or activity)<br/><br/>

    <strong>Reference:</strong> Task Force of ESC/NASPE, 1996; Shaffer &amp; Ginsberg, 2017
    """,
    "VLF Power": """
    <strong>VLF (Very Low Frequency Power)</strong><br/>
    Very low frequency band power (0.003-0.04 Hz) - Long-term regulatory mechanisms<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 100-300 ms²: Normal VLF power range<br/>
    • Below 100 ms²: Low long-term regulation<br/>
    • Above 300 ms²: High long-term regulatory activity<br/><br/>

    <strong>Interpretation:</strong><br/>
    • 100-300 ms²: Normal long-term regulation<br/>
    • Below 100 ms²: Weak long-term regulation<br/>
    • Above 300 ms²: Elevated regulatory activity<br/><br/>

    <strong>Reference:</strong> Heart Rate Variability Analysis Guidelines
    """,
    "LF Power": """
    <strong>LF (Low Frequency Power)</strong><br/>
    Low frequency band power (0.04-0.15 Hz) - Sympathetic activity indicator<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 200-1,200 ms²: Adequate sympathetic activity (study mean: 519±291 ms²)<br/>
    • Below 200 ms²: Low sympathetic nervous activity (excessive rest)<br/>
    • Above 1,200 ms²: High sympathetic nervous activity (stress or tension)<br/><br/>

    <strong>Interpretation:</strong><br/>
    • 200-1,200 ms²: Balanced sympathetic activity<br/>
    • Below 200 ms²: Excessive relaxation or inactivity<br/>
    • Above 1,200 ms²: Raised stress or physical tension<br/>

    <strong>Reference:</strong> Task Force of ESC/NASPE, 1996; Shaffer &amp; Ginsberg, 2017
    """,
    "HF Power": """
    <strong>HF (High Frequency Power)</strong><br/>
    High frequency band power (0.15-0.4 Hz) - Parasympathetic activity indicator<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 80-4,000 ms²: Adequate parasympathetic activity (study mean: 657±777 ms²)<br/>
    • Below 80 ms²: Low parasympathetic nervous activity (stress or fatigue)<br/>
    • Above 4,000 ms²: High parasympathetic nervous activity (deep rest)<br/><br/>

    <strong>Interpretation:</strong><br/>
    • 80-4,000 ms²: Normal parasympathetic activity<br/>
    • Below 80 ms²: Stress or fatigue<br/>
    • Above 4,000 ms²: Deep rest<br/><br/>

    <strong>Reference:</strong> Task Force of ESC/NASPE, 1996; Shaffer &amp; Ginsberg, 2017
    """,
    "LF Norm": """
    <strong>LF Norm (Normalized Low Frequency Power)</strong><br/>
    Low frequency power normalized to total power (LF/(LF+HF) × 100)<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 40-70%: Normal sympathetic balance<br/>
    • Below 40%: Low sympathetic activity (parasympathetic dominance)<br/>
    • Above 70%: High sympathetic activity (stress or activity state)<br/><br/>

    <strong>Interpretation:</strong> Relative sympathetic contribution to autonomic balance<br/><br/>

    <strong>Reference:</strong> HRV Analysis Standards
    """,
    "HF Norm": """
    <strong>HF Norm (Normalized High Frequency Power)</strong><br/>
    High frequency power normalized to total power (HF/(LF+HF) × 100)<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 30-60%: Normal parasympathetic balance<br/>
    • Below 30%: Low parasympathetic activity (sympathetic dominance)<br/>
    • Above 60%: High parasympathetic activity (rest state)<br/><br/>

    <strong>Interpretation:</strong> Relative parasympathetic contribution to autonomic balance<br/><br/>

    <strong>Reference:</strong> HRV Analysis Standards
    """,
    "HRV Total Power": """
    <strong>Total Power (HRV)</strong><br/>
    Total spectral power of HRV across all frequency bands<br/><br/>

    <strong>Formula:</strong> Total Power = VLF + LF + HF Power<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 1,000-5,000 ms²: Normal total HRV power<br/>
    • Below 1,000 ms²: Low overall HRV (poor autonomic function)<br/>
    • Above 5,000 ms²: High overall HRV (excellent autonomic function)<br/><br/>

    <strong>Interpretation:</strong> Higher values generally indicate better overall autonomic function<br/><br/>

    <strong>Reference:</strong> Heart Rate Variability Guidelines
    """,
    "Stress Level": """
    <strong>Stress Level</strong><br/>
    HRV-based normalized stress level (0.0-1.0 scale)<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 0.0-0.5: Normal stress (relaxed to balanced)<br/>
    • 0.0-0.2: Very low stress (optimal relaxation)<br/>
    • 0.2-0.5: Balanced stress (normal state)<br/>
    • 0.5-0.7: Moderate stress (mild tension)<br/>
    • Above 0.7: High stress (attention needed)<br/><br/>

    <strong>Interpretation:</strong><br/>
    • 0.0-0.5: Normal stress management<br/>
    • Below 0.2: Deeply relaxed and calm<br/>
    • Above 0.5: Stress or anxiety needing attention<br/>

    <strong>Reference:</strong> HRV Analysis Methods, Task Force Guidelines
    """,
    "Recovery Index": """
    <strong>Recovery Index</strong><br/>
    HRV-based recovery capacity (0-100 scale)<br/><br/>

    <strong>Formula:</strong> Based on HRV metrics and inverse stress correlation<br/>
    • Recovery = f(HRV, 1-StressLevel, AutonomicBalance) × 100<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 70-100: Excellent recovery capacity<br/>
    • 50-70: Good recovery capacity<br/>
    • 30-50: Moderate recovery capacity<br/>
    • Below 30: Low recovery capacity<br/><br/>

    <strong>Interpretation:</strong><br/>
    • 70-100: Excellent recovery capacity<br/>
    • 50-70: Good recovery capacity<br/>
    • Below 50: Reduced recovery capacity<br/><br/>

    <strong>Reference:</strong> HRV Recovery Assessment Guidelines
    """,
    "Autonomic Balance": """
    <strong>Autonomic Balance</strong><br/>
    Balance between sympathetic and parasympathetic nervous systems (0.0-1.0)<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 0.4-0.8: Balanced autonomic function<br/>
    • Below 0.4: Sympathetic dominance (stress state)<br/>
    • Above 0.8: Parasympathetic dominance (rest state)<br/><br/>

    <strong>Interpretation:</strong><br/>
    • 0.4-0.8: Balanced autonomic function<br/>
    • Below 0.4: Sympathetic dominance (stress state)<br/>
    • Above 0.8: Parasympathetic dominance (rest state)<br/><br/>

    <strong>Reference:</strong> Autonomic Function Assessment Standards
    """,
    "Cardiac Coherence": """
    <strong>Cardiac Coherence</strong><br/>
    Heart rhythm coherence and synchronization (0-100 scale)<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 60-100: High coherence (balanced state)<br/>
    • 40-60: Moderate coherence<br/>
    • 20-40: Low coherence<br/>
    • Below 20: Very low coherence (stress or dysfunction)<br/><br/>

    <strong>Interpretation:</strong><br/>
    • 60-100: High coherence (balanced state)<br/>
    • 40-60: Moderate coherence<br/>
    • Below 40: Low coherence (stress)<br/><br/>

    <strong>Reference:</strong> Heart Coherence Analysis Methods
    """,
    "Respiratory Rate": """
    <strong>Respiratory Rate</strong><br/>
    Breathing rate derived from HRV analysis (breaths per minute)<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 12-18 breaths/min: Normal respiratory rate<br/>
    • Below 12: Bradypnea (slow breathing)<br/>
    • Above 18: Tachypnea (fast breathing)<br/><br/>

    <strong>Interpretation:</strong><br/>
    • 12-18 breaths/min: Normal breathing<br/>
    • Below 12: Slow breathing (bradypnea)<br/>
    • Above 18: Fast breathing (tachypnea)<br/><br/>

    <strong>Reference:</strong> Respiratory Physiology Guidelines
    """,
    "Perfusion Index": """
    <strong>Perfusion Index</strong><br/>
    Peripheral perfusion strength indicator (%)<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 2.0-10.0%: Normal peripheral perfusion<br/>
    • Below 2.0%: Poor peripheral circulation<br/>
    • Above 10.0%: Excellent peripheral circulation<br/><br/>

    <strong>Interpretation:</strong> Higher values indicate better peripheral blood flow and circulation<br/><br/>

    <strong>Reference:</strong> Perfusion Index Clinical Guidelines
    """,
    "Vascular Tone": """
    <strong>Vascular Tone</strong><br/>
    Arterial stiffness and vascular health indicator (0-100 scale)<br/><br/>

    <strong>Description:</strong> Arterial elasticity and vascular health derived from PPG pulse wave analysis.<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 70-90: Good vascular tone<br/>
    • 50-70: Moderate vascular tone<br/>
    • 30-50: Poor vascular tone<br/>
    • Below 30: Very poor vascular health<br/><br/>

    <strong>Interpretation:</strong> Higher values indicate healthier, more elastic blood vessels<br/><br/>

    <strong>Reference:</strong> Vascular Health Assessment Guidelines
    """,
    "SDSD": """
    <strong>SDSD (Standard Deviation of Successive Differences)</strong><br/>
    Standard deviation of successive RR interval differences<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 20-150 ms: Normal variability (healthy autonomic system)<br/>
    • Below 20 ms: Low variability (stress or fatigue)<br/>
    • 50-150 ms: Excellent variability (strong recovery)<br/>
    • Above 150 ms: Very high variability (elite athlete level)<br/><br/>

    <strong>Interpretation:</strong><br/>
    • 20-150 ms: Normal, healthy autonomic response<br/>
    • Below 20 ms: Reduced autonomic response<br/>
    • Above 100 ms: Excellent autonomic flexibility<br/>

    <strong>Meaning:</strong> Similar to RMSSD with a different calculation.<br/><br/>

    <strong>Reference:</strong> Heart Rate Variability Analysis Methods
    """,
    "AVNN": """
    <strong>AVNN (Average NN Intervals)</strong><br/>
    Average heart cycle - Average of heartbeat intervals<br/><br/>

    <strong>Formula:</strong> AVNN = Σ(RRᵢ) / N<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 600-1000 ms: Stable heart rhythm<br/>
    • Below 600 ms: Fast heart rate (active or tense state)<br/>
    • Above 1000 ms: Slow heart rate (rest state or athlete type)<br/><br/>

    <strong>Interpretation:</strong> Reflects average cardiac cycle length; higher values suggest parasympathetic dominance<br/><br/>

    <strong>Reference:</strong> Task Force of ESC/NASPE, 1996
    """,
    "PNN20": """
    <strong>PNN20 (Percentage of NN20)</strong><br/>
    Indicator for detecting subtle changes in heart rhythm<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 20-60%: Adequate heart rate variability<br/>
    • Below 20%: Consistent heart rhythm (tension or fatigue state)<br/>
    • Above 60%: Flexible heart rhythm (healthy state)<br/><br/>

    <strong>Meaning:</strong> More sensitive than PNN50, can detect small stress or recovery states.<br/><br/>

    <strong>Reference:</strong> HRV Analysis Methods, IEEE TBME
    """,
    "HR Max": """
    <strong>HR Max (Heart Rate Maximum)</strong><br/>
    Maximum heart rate measured in the last 2 minutes (120 samples)<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 80-150 BPM: Normal maximum heart rate<br/>
    • Below 80 BPM: Low maximum heart rate<br/>
    • Above 150 BPM: High maximum heart rate<br/><br/>

    <strong>Interpretation:</strong> Upper bound of recent heart rate variation, useful for stress response and activity intensity<br/><br/>

    <strong>Reference:</strong> Heart Rate Variability Analysis Guidelines
    """,
    "HR Min": """
    <strong>HR Min (Heart Rate Minimum)</strong><br/>
    Minimum heart rate measured in the last 2 minutes (120 samples)<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 50-80 BPM: Normal minimum heart rate<br/>
    • Below 50 BPM: Low minimum heart rate<br/>
    • Above 80 BPM: High minimum heart rate<br/><br/>

    <strong>Interpretation:</strong> Lower bound of recent heart rate variation, useful for resting efficiency and recovery<br/><br/>

    <strong>Reference:</strong> Heart Rate Variability Analysis Guidelines
    """,
    # Blood pressure
    "Systolic BP": """
    <strong>Systolic BP (Systolic Blood Pressure)</strong><br/>
    Maximum arterial pressure during cardiac contraction<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 90-120 mmHg: Normal systolic pressure<br/>
    • Below 90 mmHg: Hypotension (low blood pressure)<br/>
    • 120-139 mmHg: Prehypertension<br/>
    • Above 140 mmHg: Hypertension (high blood pressure)<br/><br/>

    <strong>Interpretation:</strong> Reflects cardiovascular health and pump function; high values suggest raised cardiovascular risk<br/><br/>

    <strong>Reference:</strong> American Heart Association Blood Pressure Guidelines
    """,
    "Diastolic BP": """
    <strong>Diastolic BP (Diastolic Blood Pressure)</strong><br/>
    Minimum arterial pressure during cardiac relaxation<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 60-80 mmHg: Normal diastolic pressure<br/>
    • Below 60 mmHg: Hypotension (low blood pressure)<br/>
    • 80-89 mmHg: Prehypertension<br/>
    • Above 90 mmHg: Hypertension (high blood pressure)<br/><br/>

    <strong>Interpretation:</strong> Reflects vascular health and arterial stiffness; high values indicate raised peripheral resistance<br/><br/>

    <strong>Reference:</strong> American Heart Association Blood Pressure Guidelines
    """,
    "Cardiac Efficiency": """
    <strong>Cardiac Efficiency</strong><br/>
    Overall cardiac performance and efficiency index (percentage scale)<br/><br/>

    <strong>Description:</strong> Composite of the heart's ability to pump blood effectively with minimal energy expenditure, from HRV and cardiac output indicators.<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 70-100%: High cardiac efficiency (optimal performance)<br/>
    • 50-70%: Moderate cardiac efficiency<br/>
    • 30-50%: Low cardiac efficiency<br/>
    • Below 30%: Very low cardiac efficiency (potential cardiac dysfunction)<br/><br/>

    <strong>Interpretation:</strong> Higher values indicate better cardiovascular fitness and heart function<br/><br/>

    <strong>Reference:</strong> Cardiac Performance Assessment Standards
    """,
    "Metabolic Rate": """
    <strong>Metabolic Rate</strong><br/>
    Estimated metabolic rate from cardiac and respiratory indicators (kcal/day scale)<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 1200-2000: Normal metabolic rate<br/>
    • Below 1200: Low metabolic activity (rest state)<br/>
    • 2000-3000: Elevated metabolic rate (active state)<br/>
    • Above 3000: High metabolic rate (stress or intense activity)<br/><br/>

    <strong>Interpretation:</strong> Reflects overall metabolic activity and energy expenditure<br/><br/>

    <strong>Reference:</strong> Metabolic Assessment Guidelines
    """,
    # Accelerometer
    "Activity Level": """
    <strong>Activity Level</strong><br/>
    Physical activity intensity level based on accelerometer data<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 1.0-3.0: Normal daily activity level<br/>
    • Below 1.0: Sedentary state (minimal movement)<br/>
    • Above 3.0: Active state (exercise or vigorous activity)<br/><br/>

    <strong>Interpretation:</strong> Higher values indicate more physical activity; very low values may suggest prolonged sitting<br/><br/>

    <strong>Reference:</strong> Physical Activity Assessment Guidelines
    """,
    "Movement Intensity": """
    <strong>Movement Intensity</strong><br/>
    Intensity of physical movement and acceleration patterns<br/><br/>

    <strong>Description:</strong> Movement vigor from acceleration magnitude variation and frequency analysis.<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 0.1-0.5: Normal movement intensity<br/>
    • Below 0.1: Very low intensity (rest or sleep)<br/>
    • Above 0.5: High intensity (exercise or vigorous activity)<br/><br/>

    <strong>Interpretation:</strong> Indicates how vigorous body movement is; useful for activity classification and energy expenditure estimates<br/><br/>

    <strong>Reference:</strong> Accelerometry Movement Analysis Standards
    """,
    "Postural Stability": """
    <strong>Postural Stability</strong><br/>
    Body balance and postural control stability (0.0-1.0 scale)<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 0.7-1.0: Excellent postural stability<br/>
    • 0.5-0.7: Moderate stability (acceptable)<br/>
    • Below 0.5: Low stability (balance needs improvement)<br/><br/>

    <strong>Interpretation:</strong><br/>
    • 0.7-1.0: Excellent balance control and postural stability<br/>
    • 0.5-0.7: Moderate balance<br/>
    • Below 0.5: Balance training recommended<br/><br/>

    <strong>Reference:</strong> Postural Control Assessment Guidelines
    """,
    "Movement Quality": """
    <strong>Movement Quality</strong><br/>
    Quality and coordination of movement patterns (0.0-1.0 scale)<br/><br/>

    <strong>Description:</strong> Smoothness, coordination and symmetry of movement from acceleration pattern analysis.<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 0.7-0.9: Good movement quality<br/>
    • 0.5-0.7: Moderate movement quality<br/>
    • Below 0.5: Poor movement quality (coordination issues)<br/><br/>

    <strong>Interpretation:</strong> Higher values indicate smoother, more coordinated movement; low values may suggest a movement disorder<br/><br/>

    <strong>Reference:</strong> Movement Quality Assessment Research
    """,
    "Activity State": """
    <strong>Activity State</strong><br/>
    Physical activity level classified from accelerometer data<br/><br/>

    <strong>Formula:</strong> Movement magnitude = |√(x² + y² + z²) - 1g|<br/><br/>

    <strong>Classification Criteria:</strong><br/>
    • 0.0-0.1g: Stationary<br/>
    • 0.1-0.3g: Sitting (light movement)<br/>
    • 0.3-0.8g: Walking (moderate activity)<br/>
    • Above 0.8g: Running (vigorous activity)<br/><br/>

    <strong>Interpretation:</strong> Real-time activity intensity classification for metabolic and exercise assessment<br/><br/>

    <strong>Reference:</strong> Troiano, R. P., et al. (2008). Medicine &amp; Science in Sports &amp; Exercise, 40(1), 181-188
    """,
    "Stability": """
    <strong>Stability Index</strong><br/>
    Postural stability and ability to maintain balance<br/><br/>

    <strong>Measurement Method:</strong> Derived from the standard deviation of acceleration changes<br/>
    <strong>Formula:</strong> Stability = 100 - (Movement variability × Normalization factor)<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 70-100%: Very stable posture<br/>
    • 50-70%: Moderate stability (everyday movement)<br/>
    • 30-50%: Unstable posture (needs attention)<br/>
    • Below 30%: Very unstable (possible balance disorder)<br/><br/>

    <strong>Interpretation:</strong> Higher values indicate a stable posture with low fall risk and good balance<br/><br/>

    <strong>Reference:</strong> Mancini, M., &amp; Horak, F. B. (2010). Journal of NeuroEngineering and Rehabilitation, 7(1), 17
    """,
    "Intensity": """
    <strong>Intensity Index</strong><br/>
    Overall movement intensity and energy expenditure level<br/><br/>

    <strong>Measurement Method:</strong> Uses the mean and maximum acceleration magnitude<br/>
    <strong>Formula:</strong> Intensity = (Average movement magnitude / Maximum possible movement) × 100<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 0-25%: Low intensity activity (rest, sleep)<br/>
    • 25-50%: Low-moderate intensity activity (daily life)<br/>
    • 50-75%: Moderate-high intensity activity (exercise, work)<br/>
    • 75-100%: High intensity activity (vigorous exercise)<br/><br/>

    <strong>Interpretation:</strong> Quantifies physical activity intensity for exercise assessment and health management<br/><br/>

    <strong>Reference:</strong> Freedson, P. S., et al. (1998). Medicine &amp; Science in Sports &amp; Exercise, 30(5), 777-781
    """,
    "Balance": """
    <strong>Balance Index</strong><br/>
    Movement balance between the X and Y axes (left-right and front-back symmetry)<br/><br/>

    <strong>Measurement Method:</strong> Relative distribution of X-axis and Y-axis acceleration<br/>
    <strong>Formula:</strong> Balance = 100 - |X-axis movement ratio - Y-axis movement ratio| × 200<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 80-100%: Very balanced movement<br/>
    • 60-80%: Good balance (normal range)<br/>
    • 40-60%: Unbalanced movement (needs attention)<br/>
    • Below 40%: Severe imbalance (rehabilitation may be needed)<br/><br/>

    <strong>Interpretation:</strong> Evaluates left-right and front-back symmetry to detect gait or posture abnormalities<br/><br/>

    <strong>Reference:</strong> Hausdorff, J. M. (2007). Journal of NeuroEngineering and Rehabilitation, 4(1), 14
    """,
    "Average Movement": """
    <strong>Average Movement</strong><br/>
    Mean movement magnitude over the measurement period (gravity corrected)<br/><br/>

    <strong>Measurement Method:</strong> Average of the movement magnitude of all samples<br/>
    <strong>Formula:</strong> Average movement = Σ|√(xᵢ² + yᵢ² + zᵢ²) - 1g| / N<br/>
    <strong>Unit:</strong> g (gravitational acceleration, 1g = 9.8 m/s²)<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 0.0-0.1g: Static state (sleep, rest)<br/>
    • 0.1-0.3g: Light activity (office work, reading)<br/>
    • 0.3-0.6g: Moderate activity (walking, housework)<br/>
    • Above 0.6g: Active (exercise, physical work)<br/><br/>

    <strong>Interpretation:</strong> Overall activity level across the period, used for daily activity and health assessment<br/><br/>

    <strong>Reference:</strong> Sasaki, J. E., et al. (2011). Medicine &amp; Science in Sports &amp; Exercise, 43(8), 1568-1574
    """,
    "Standard Deviation Movement": """
    <strong>Standard Deviation Movement</strong><br/>
    Variability and irregularity of movement magnitude<br/><br/>

    <strong>Measurement Method:</strong> Standard deviation of the movement magnitudes<br/>
    <strong>Formula:</strong> Standard deviation = √(Σ(movementᵢ - average movement)² / (N-1))<br/>
    <strong>Unit:</strong> g (gravitational acceleration)<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 0.0-0.1g: Very consistent movement (static state)<br/>
    • 0.1-0.3g: Consistent movement (regular activity)<br/>
    • 0.3-0.6g: Varying movement (mixed activity)<br/>
    • Above 0.6g: Very irregular movement (vigorous or unstable activity)<br/><br/>

    <strong>Interpretation:</strong> Low: regular and predictable movement; High: irregular and varied movement patterns<br/><br/>

    <strong>Reference:</strong> Bussmann, J. B., &amp; van de Berg-Emons, R. J. (2013). Gait &amp; Posture, 37(3), 340-347
    """,
    "Max Movement": """
    <strong>Max Movement</strong><br/>
    Largest movement magnitude detected during the measurement period<br/><br/>

    <strong>Measurement Method:</strong> Largest movement magnitude among all samples<br/>
    <strong>Formula:</strong> Maximum movement = max(|√(xᵢ² + yᵢ² + zᵢ²) - 1g|)<br/>
    <strong>Unit:</strong> g (gravitational acceleration)<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 0.0-0.5g: Everyday movement<br/>
    • 0.5-1.0g: Brisk movement (exercise, work)<br/>
    • 1.0-2.0g: Vigorous movement (running, jumping)<br/>
    • Above 2.0g: Very vigorous movement (impact, possible fall)<br/><br/>

    <strong>Interpretation:</strong> Detects peak acceleration events to monitor impacts, falls and vigorous activity<br/><br/>

    <strong>Reference:</strong> Karantonis, D. M., et al. (2006). IEEE Transactions on Information Technology in Biomedicine, 10(1), 156-167
    """,
    "Motion Artifact": """
    <strong>Motion Artifact</strong><br/>
    Motion artifact level in PPG signal measurement (0.0-1.0 scale)<br/><br/>

    <strong>Normal Range:</strong><br/>
    • 0.0-0.2: Low motion noise (good signal quality)<br/>
    • 0.2-0.4: Moderate motion noise (acceptable)<br/>
    • Above 0.4: High motion artifact (signal quality concerns)<br/><br/>

    <strong>Interpretation:</strong> Lower values indicate better signal quality with less motion interference<br/><br/>

    <strong>Reference:</strong> PPG Signal Quality Assessment Guidelines
    """,
}

INDEX_GUIDES = MappingProxyType(_GUIDES)


def get_guide(metric_name: str) -> MetricGuide | None:
    """Return the guide for `metric_name`, or None if the catalog has no entry."""
    raw_text = INDEX_GUIDES.get(metric_name)
    if raw_text is None:
        return None
    return MetricGuide(metric_name=metric_name, raw_text=raw_text)


def metric_names() -> list[str]:
    return list(INDEX_GUIDES)
